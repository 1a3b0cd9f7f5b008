"""
User domain models and schemas.

Request/response schemas for user operations.

Dependencies: pydantic
System role: User API contracts
"""

from datetime import datetime

from pydantic import Field, field_validator

from photobooth.models.common import CamelModel


class CreateUserRequest(CamelModel):
    """Request schema for creating a new user."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class UserResponse(CamelModel):
    """Response schema for user operations."""

    id: int
    name: str
    created_at: datetime
