"""Authentication services."""

from .dtos import AuthPayload, TokenClaims
from .token_service import JwtTokenService
from .auth_service import AuthService

__all__ = ["AuthPayload", "TokenClaims", "JwtTokenService", "AuthService"]
