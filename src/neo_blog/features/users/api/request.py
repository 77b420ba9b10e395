"""User request models."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class UserCreateRequest(BaseModel):
    email: str = Field(..., description="Email address")
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Plain text password")
    role: Literal["USER", "ADMIN"] = Field("USER", description="User role")


class UserUpdateRequest(BaseModel):
    """Omitted fields are left unchanged. Only admins may change ``role``."""

    email: Optional[str] = Field(None, description="New email address")
    username: Optional[str] = Field(None, description="New username")
    password: Optional[str] = Field(None, description="New password")
    role: Optional[Literal["USER", "ADMIN"]] = Field(None, description="New role")
