"""bcrypt implementation of PasswordHasher."""

import asyncio
import logging

import bcrypt

from ...core.exceptions import ArgumentNotProvidedError, ConfigurationError
from ...core.protocols import PasswordHasher

logger = logging.getLogger(__name__)

MIN_SALT_ROUNDS = 4
# bcrypt ignores input past 72 bytes and recent releases reject it outright.
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashes with a configurable cost factor.

    The bcrypt calls run in a worker thread so other requests keep being
    served while a hash is computed.
    """

    def __init__(self, salt_rounds: int = 10):
        if salt_rounds < MIN_SALT_ROUNDS:
            raise ConfigurationError(
                f"bcrypt salt rounds must be at least {MIN_SALT_ROUNDS}, got {salt_rounds}"
            )
        self.salt_rounds = salt_rounds

    @staticmethod
    def _encode(plain: str) -> bytes:
        return plain.encode("utf-8")[:MAX_PASSWORD_BYTES]

    async def hash(self, plain: str) -> str:
        if not plain:
            raise ArgumentNotProvidedError("Password cannot be empty")
        salt = bcrypt.gensalt(rounds=self.salt_rounds)
        hashed = await asyncio.to_thread(bcrypt.hashpw, self._encode(plain), salt)
        return hashed.decode("utf-8")

    async def compare(self, plain: str, hashed: str) -> bool:
        if not plain or not hashed:
            return False
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, self._encode(plain), hashed.encode("utf-8")
            )
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False
