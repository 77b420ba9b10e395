"""
JWT access token issuing and verification with python-jose.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from ....core.exceptions import ConfigurationError, InvalidTokenError, TokenExpiredError
from ...users.application.dtos import UserDto
from .dtos import TokenClaims

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ("sub", "username", "email", "role", "iat", "exp")


class JwtTokenService:
    """Signs and verifies HS-family access tokens.

    Tokens carry ``sub`` (the user id as a string), ``username``, ``email``,
    ``role``, ``iat`` and ``exp``.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: int = 3600):
        if not secret:
            raise ConfigurationError("JWT secret cannot be empty")
        if expires_in <= 0:
            raise ConfigurationError("JWT expiration time must be positive")
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def create_access_token(self, user: UserDto) -> str:
        issued_at = datetime.now(timezone.utc)
        claims: Dict[str, Any] = {
            "sub": str(user.id),
            "username": user.username,
            "email": user.email,
            "role": user.role,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + timedelta(seconds=self.expires_in)).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenClaims:
        """Verify signature and expiry and return the token's claims.

        Raises:
            TokenExpiredError: if ``exp`` is in the past
            InvalidTokenError: on any other verification failure
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise TokenExpiredError("Token has expired.")
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            raise InvalidTokenError("Invalid token.")

        missing = [claim for claim in REQUIRED_CLAIMS if claim not in payload]
        if missing:
            raise InvalidTokenError(f"Token is missing claims: {', '.join(missing)}")
        if not str(payload["sub"]).isdigit():
            raise InvalidTokenError("Invalid token subject.")

        return TokenClaims(
            user_id=int(payload["sub"]),
            username=payload["username"],
            email=payload["email"],
            role=payload["role"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
