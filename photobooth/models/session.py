"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime

from pydantic import Field

from photobooth.models.common import CamelModel
from photobooth.models.photo import PhotoResponse


class CreateSessionRequest(CamelModel):
    """Request schema for creating a new session."""

    user_id: int = Field(..., gt=0, description="Owning user id")


class SessionResponse(CamelModel):
    """
    Response schema for session operations.

    photos is populated (newest first) only by the detailed session view.
    """

    id: int
    user_id: int
    created_at: datetime
    photos: list[PhotoResponse] = Field(default_factory=list)
