"""User read models. Password hashes never leave the domain layer."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserDto:
    id: int
    email: str
    username: str
    role: str
    created_at: datetime
    updated_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == "ADMIN"
