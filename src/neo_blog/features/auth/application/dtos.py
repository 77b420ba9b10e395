"""Authentication read models."""

from dataclasses import dataclass
from datetime import datetime

from ...users.application.dtos import UserDto


@dataclass(frozen=True)
class TokenClaims:
    """Verified claims of an access token."""
    user_id: int
    username: str
    email: str
    role: str
    issued_at: datetime
    expires_at: datetime


@dataclass
class AuthPayload:
    access_token: str
    expires_in: int
    user: UserDto
    token_type: str = "bearer"
