"""
Photo domain models and schemas.

Request/response schemas for photo operations.

Dependencies: pydantic
System role: Photo API contracts
"""

from datetime import datetime

from pydantic import Field, field_validator

from photobooth.models.common import CamelModel


class CreatePhotoRequest(CamelModel):
    """Request schema for registering a photo by URL."""

    session_id: int = Field(..., gt=0, description="Parent session id")
    image_url: str = Field(..., min_length=1, max_length=500, description="Image URL")

    @field_validator("image_url")
    @classmethod
    def image_url_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("imageUrl must not be blank")
        return value


class PhotoResponse(CamelModel):
    """Response schema for photo operations."""

    id: int
    session_id: int
    image_url: str
    created_at: datetime
