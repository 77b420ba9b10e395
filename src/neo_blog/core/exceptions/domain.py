"""Domain and application exception hierarchy.

Feature packages subclass these kinds; the transport layer only needs to
know the kind to pick a status code.
"""

from typing import Any, Dict, Optional

from .base import NeoBlogError


# Validation

class DomainValidationError(NeoBlogError):
    """Value object or entity invariant violated."""
    pass


class ArgumentNotProvidedError(DomainValidationError):
    """A required value is missing or empty."""
    pass


class ArgumentOutOfRangeError(DomainValidationError):
    """A value is outside its allowed bounds."""
    pass


class ArgumentInvalidError(DomainValidationError):
    """A value has the wrong type or format."""
    pass


# Business rules

class InvalidStateError(NeoBlogError):
    """Operation is not allowed in the aggregate's current state."""
    pass


# Lookups

class ResourceNotFoundError(NeoBlogError):
    """A required aggregate or reference target does not exist.

    Subclasses set ``resource`` so the message reads
    ``"<resource> not found matching criteria: <criteria>"``.
    """

    resource = "Resource"

    def __init__(self, criteria: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"{self.resource} not found matching criteria: {criteria}",
            details={"criteria": criteria, **(details or {})},
        )
        self.criteria = criteria


class ConflictError(NeoBlogError):
    """A uniqueness or referential constraint would be violated."""
    pass


# Access control

class AuthenticationError(NeoBlogError):
    """Caller identity could not be established."""
    pass


class InvalidCredentialsError(AuthenticationError):
    """Email and password do not match."""
    pass


class InvalidTokenError(AuthenticationError):
    """Bearer token is malformed, has a bad signature or names an unknown user."""
    pass


class TokenExpiredError(AuthenticationError):
    """Bearer token has expired."""
    pass


class ForbiddenError(NeoBlogError):
    """Caller is not allowed to perform the requested mutation."""
    pass


# Internal

class PostConditionError(NeoBlogError):
    """A write succeeded but its read model could not be fetched afterwards."""
    pass


class HandlerNotFoundError(NeoBlogError):
    """No handler is registered for a command or query type."""
    pass


class ConfigurationError(NeoBlogError):
    """Invalid application configuration."""
    pass
