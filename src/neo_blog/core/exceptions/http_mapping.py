"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .domain import (
    DomainValidationError,
    InvalidStateError,
    ResourceNotFoundError,
    ConflictError,
    AuthenticationError,
    ForbiddenError,
    PostConditionError,
    HandlerNotFoundError,
    ConfigurationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    DomainValidationError: 400,
    InvalidStateError: 400,

    # 401 Unauthorized
    AuthenticationError: 401,

    # 403 Forbidden
    ForbiddenError: 403,

    # 404 Not Found
    ResourceNotFoundError: 404,

    # 409 Conflict
    ConflictError: 409,

    # 500 Internal Server Error
    PostConditionError: 500,
    HandlerNotFoundError: 500,
    ConfigurationError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Resolve the status code of the closest mapped base class."""
    for klass in type(exception).__mro__:
        status = HTTP_STATUS_MAP.get(klass)
        if status is not None:
            return status
    return 500
