"""API-specific dependencies."""

from .dependencies import (
    get_photo_service,
    get_photo_storage,
    get_session_service,
    get_settings_dependency,
    get_upload_service,
    get_user_service,
)

__all__ = [
    "get_photo_service",
    "get_photo_storage",
    "get_session_service",
    "get_settings_dependency",
    "get_upload_service",
    "get_user_service",
]
