"""
Dependency injection container.

Factory functions for FastAPI dependencies. Every service built for a
request shares that request's AsyncSession.

Dependencies: photobooth.configs, photobooth.application, photobooth.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from photobooth.application.services import (
    PhotoService,
    SessionService,
    UploadService,
    UserService,
)
from photobooth.boundary.db import get_async_db
from photobooth.boundary.storage import LocalPhotoStorage
from photobooth.configs import Settings, get_settings


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(db=db)


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)


def get_photo_service(db: AsyncSession = Depends(get_async_db)) -> PhotoService:
    """
    Get photo service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        PhotoService: Photo service instance
    """
    return PhotoService(db=db)


def get_photo_storage(
    settings: Settings = Depends(get_settings_dependency),
) -> LocalPhotoStorage:
    """Get local photo storage rooted at the configured upload directory."""
    return LocalPhotoStorage(
        directory=settings.uploads.photos_dir,
        public_url_prefix=settings.uploads.photos_url_prefix,
    )


def get_upload_service(
    db: AsyncSession = Depends(get_async_db),
    storage: LocalPhotoStorage = Depends(get_photo_storage),
) -> UploadService:
    """
    Get upload service instance.

    Args:
        db: Async database session (injected via Depends)
        storage: Photo storage from upload settings (injected)

    Returns:
        UploadService: Upload pipeline bound to storage and a photo service
    """
    return UploadService(storage=storage, photo_service=PhotoService(db=db))
