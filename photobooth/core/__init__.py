"""
Core business logic module.

Contains the domain exception hierarchy shared by services and routers.
"""

from photobooth.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    PhotoboothException,
    StorageFaultError,
    UploadLinkError,
    ValidationError,
)

__all__ = [
    "PhotoboothException",
    "NotFoundError",
    "ValidationError",
    "InvalidInputError",
    "StorageFaultError",
    "UploadLinkError",
]
