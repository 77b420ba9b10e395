"""Auth response models."""

from pydantic import BaseModel, ConfigDict, Field

from ...users.api.response import UserResponse


class AuthResponse(BaseModel):
    """Access token plus the authenticated user."""

    model_config = ConfigDict(from_attributes=True)

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse = Field(..., description="Authenticated user")
