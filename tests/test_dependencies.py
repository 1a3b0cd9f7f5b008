"""
Test suite for dependency injection container.

Tests factory functions for service creation and configuration.

System role: Verification of DI container
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from photobooth.api.deps import (
    get_photo_service,
    get_photo_storage,
    get_session_service,
    get_settings_dependency,
    get_upload_service,
    get_user_service,
)
from photobooth.application.services import (
    PhotoService,
    SessionService,
    UploadService,
    UserService,
)
from photobooth.boundary.storage import LocalPhotoStorage
from photobooth.configs import Settings
from photobooth.configs.uploads import UploadSettings


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


class TestServiceFactories:
    """Each factory binds its service to the request session."""

    def test_get_user_service(self, mock_db_session: AsyncSession) -> None:
        service = get_user_service(db=mock_db_session)

        assert isinstance(service, UserService)
        assert service.db is mock_db_session

    def test_get_session_service_shares_session_with_user_service(
        self, mock_db_session: AsyncSession
    ) -> None:
        service = get_session_service(db=mock_db_session)

        assert isinstance(service, SessionService)
        assert service.user_service.db is mock_db_session

    def test_get_photo_service_chains_parent_services(
        self, mock_db_session: AsyncSession
    ) -> None:
        service = get_photo_service(db=mock_db_session)

        assert isinstance(service, PhotoService)
        assert service.session_service.db is mock_db_session
        assert service.session_service.user_service.db is mock_db_session

    def test_get_upload_service(self, mock_db_session: AsyncSession, photo_storage) -> None:
        service = get_upload_service(db=mock_db_session, storage=photo_storage)

        assert isinstance(service, UploadService)
        assert service.storage is photo_storage
        assert service.photo_service.db is mock_db_session


class TestSettingsFactories:

    def test_get_settings_dependency_is_cached(self) -> None:
        assert get_settings_dependency() is get_settings_dependency()
        assert isinstance(get_settings_dependency(), Settings)

    def test_get_photo_storage_uses_upload_settings(self, temp_dir: Path) -> None:
        settings = Settings(
            uploads=UploadSettings(root_dir=temp_dir, public_prefix="/media/"),
        )

        storage = get_photo_storage(settings=settings)

        assert isinstance(storage, LocalPhotoStorage)
        assert storage.directory == temp_dir / "photos"
        assert storage.public_url_prefix == "/media/photos"
