"""Response models shared by every router."""

from pydantic import BaseModel, ConfigDict, Field


class DeleteResponse(BaseModel):
    """Outcome of a delete endpoint."""

    model_config = ConfigDict(from_attributes=True)

    success: bool = Field(..., description="Whether a row was removed")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service status")
    app: str = Field(..., description="Application name")
    version: str = Field(..., description="Application version")
    storage_backend: str = Field(..., description="Active storage backend")
