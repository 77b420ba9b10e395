"""Exception hierarchy shared by every feature."""

from .base import NeoBlogError, create_error_response
from .domain import (
    DomainValidationError,
    ArgumentNotProvidedError,
    ArgumentOutOfRangeError,
    ArgumentInvalidError,
    InvalidStateError,
    ResourceNotFoundError,
    ConflictError,
    AuthenticationError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
    ForbiddenError,
    PostConditionError,
    HandlerNotFoundError,
    ConfigurationError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "NeoBlogError",
    "create_error_response",
    "get_http_status_code",
    "HTTP_STATUS_MAP",
    "DomainValidationError",
    "ArgumentNotProvidedError",
    "ArgumentOutOfRangeError",
    "ArgumentInvalidError",
    "InvalidStateError",
    "ResourceNotFoundError",
    "ConflictError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "TokenExpiredError",
    "ForbiddenError",
    "PostConditionError",
    "HandlerNotFoundError",
    "ConfigurationError",
]
