"""Service orchestrators."""

from .photo_service import PhotoService
from .session_service import SessionService
from .upload_service import UploadResult, UploadService
from .user_service import UserService

__all__ = [
    "PhotoService",
    "SessionService",
    "UploadResult",
    "UploadService",
    "UserService",
]
