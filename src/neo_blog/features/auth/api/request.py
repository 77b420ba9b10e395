"""Auth request models."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class RegisterRequest(BaseModel):
    email: str = Field(..., description="Email address")
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")
