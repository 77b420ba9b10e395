"""Base exceptions for neo-blog.

Every error raised on purpose by the domain or application layers inherits
from NeoBlogError and carries an error code and optional details so the
transport boundary can render a structured response.
"""

from typing import Any, Dict, Optional


class NeoBlogError(Exception):
    """Base exception for all neo-blog errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


def create_error_response(exception: NeoBlogError) -> Dict[str, Any]:
    """Render the `{"error": {...}}` body every failing endpoint returns."""
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
