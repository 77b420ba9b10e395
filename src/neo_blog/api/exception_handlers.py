"""
Exception handlers mapping neo-blog errors to JSON responses.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    AuthenticationError,
    NeoBlogError,
    create_error_response,
    get_http_status_code,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


class ExceptionHandlerRegistry:
    """Installs the error handlers of one application."""

    def __init__(self, is_production: bool = True):
        self.is_production = is_production

    def _internal_error_body(self, code: str, message: str, error_type: str) -> Dict[str, Any]:
        return {
            "error": {
                "code": code,
                "message": GENERIC_ERROR_MESSAGE if self.is_production else message,
                "details": {},
                "type": error_type,
            }
        }

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Request validation errors keep FastAPI's own 422 handler.
        """

        @app.exception_handler(NeoBlogError)
        async def neo_blog_error_handler(request: Request, exc: NeoBlogError):
            status_code = get_http_status_code(exc)
            headers = None

            if status_code >= 500:
                logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
                content = self._internal_error_body(exc.error_code, exc.message, type(exc).__name__)
            else:
                logger.debug(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
                content = create_error_response(exc)

            if isinstance(exc, AuthenticationError):
                headers = {"WWW-Authenticate": "Bearer"}

            return JSONResponse(status_code=status_code, content=content, headers=headers)

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=self._internal_error_body("InternalServerError", str(exc), type(exc).__name__),
            )


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """Create an ExceptionHandlerRegistry and register its handlers in one call."""
    registry = ExceptionHandlerRegistry(is_production)
    registry.register_handlers(app)
