"""
Upload models and schemas.

Request/response schemas for the upload pipeline.

Dependencies: pydantic
System role: Upload API contracts
"""

from pydantic import Field

from photobooth.models.common import CamelModel


class Base64UploadRequest(CamelModel):
    """Request schema for a base64 image upload."""

    image_data: str = Field(
        ...,
        min_length=1,
        description="Base64 image, optionally prefixed with a data URL header",
    )
    session_id: int | None = Field(None, gt=0, description="Session to attach the photo to")
    extension: str | None = Field(None, description="File extension, png when omitted")


class UploadResponse(CamelModel):
    """Upload result; error is set and success false when the upload failed."""

    success: bool
    image_url: str | None = None
    filename: str | None = None
    photo_id: int | None = None
    error: str | None = None
