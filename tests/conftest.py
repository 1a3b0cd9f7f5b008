"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite async database sessions, temp upload directories, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import base64
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Smallest valid PNG (1x1 transparent pixel)
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from photobooth.boundary.db.base import Base
    from photobooth.boundary.db import models  # noqa: F401

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def temp_dir():
    """
    Create a temporary directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="photobooth_test_"))
    yield temp_path

    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def photos_dir(temp_dir: Path) -> Path:
    """Upload destination inside the temp directory (not created up front)."""
    return temp_dir / "photos"


@pytest.fixture
def photo_storage(photos_dir: Path):
    """LocalPhotoStorage writing to the temp photos directory."""
    from photobooth.boundary.storage import LocalPhotoStorage

    return LocalPhotoStorage(photos_dir, "/uploads/photos")


@pytest.fixture
def png_bytes() -> bytes:
    """Raw bytes of a tiny PNG image."""
    return PNG_BYTES


@pytest.fixture
def png_base64() -> str:
    """Base64 text of a tiny PNG image, without data URL prefix."""
    return base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def now() -> datetime:
    """Fixed timezone-aware timestamp for representation fixtures."""
    return datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def mock_user_service():
    """
    Create mock UserService for testing.

    Returns:
        AsyncMock: Mocked UserService with async methods
    """
    return AsyncMock()


@pytest.fixture
def mock_session_service():
    """Create mock SessionService for testing."""
    return AsyncMock()


@pytest.fixture
def mock_photo_service():
    """Create mock PhotoService for testing."""
    return AsyncMock()


@pytest.fixture
def mock_upload_service():
    """Create mock UploadService for testing."""
    return AsyncMock()
