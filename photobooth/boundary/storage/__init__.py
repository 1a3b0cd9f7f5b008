"""Local filesystem storage for uploaded photos."""

from .local_storage import LocalPhotoStorage, StoredFile

__all__ = ["LocalPhotoStorage", "StoredFile"]
