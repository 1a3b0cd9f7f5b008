"""
End-to-end scenario through the HTTP API against a file SQLite database.

Real services, CRUD and storage are wired; only the database session and
the upload directory are redirected to temporary locations.

System role: Verification of the full request path
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from photobooth.api.deps.dependencies import get_photo_storage
from photobooth.api.main import create_app
from photobooth.boundary.db import get_async_db
from photobooth.boundary.db.base import Base
from photobooth.boundary.storage import LocalPhotoStorage


@pytest.fixture
def client(temp_dir: Path, photos_dir: Path):
    db_path = temp_dir / "photobooth.db"

    # Schema via the sync driver so no event loop is shared with the app
    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    async_engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    factory = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async def override_get_async_db():
        async with factory() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_async_db] = override_get_async_db
    app.dependency_overrides[get_photo_storage] = lambda: LocalPhotoStorage(
        photos_dir, "/uploads/photos"
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_user_session_photo_lifecycle(client):
    # Create user "Ava"
    response = client.post("/api/v1/users", json={"name": "Ava"})
    assert response.status_code == 201
    assert response.json()["id"] == 1

    # Session for user 1 starts with no photos
    response = client.post("/api/v1/sessions", json={"userId": 1})
    assert response.status_code == 201
    assert response.json()["id"] == 1
    assert response.json()["photos"] == []

    # Photo by URL
    response = client.post(
        "/api/v1/photos",
        json={"sessionId": 1, "imageUrl": "https://x/a.jpg"},
    )
    assert response.status_code == 201
    assert response.json()["id"] == 1

    # Session detail embeds the photo
    response = client.get("/api/v1/sessions/1")
    assert response.status_code == 200
    photos = response.json()["photos"]
    assert len(photos) == 1
    assert photos[0]["imageUrl"] == "https://x/a.jpg"

    # Deleting the user cascades
    response = client.delete("/api/v1/users/1")
    assert response.status_code == 204

    assert client.get("/api/v1/sessions/1").status_code == 404
    assert client.get("/api/v1/photos/1").status_code == 404
    assert client.get("/api/v1/users/1").status_code == 404


def test_upload_links_photo_and_missing_session_keeps_file(client, photos_dir, png_bytes, png_base64):
    client.post("/api/v1/users", json={"name": "Ava"})
    client.post("/api/v1/sessions", json={"userId": 1})

    # Multipart upload linked to session 1
    response = client.post(
        "/api/v1/upload/file",
        files={"file": ("shot.JPG", png_bytes, "image/jpeg")},
        data={"sessionId": "1"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["filename"].endswith(".jpg")
    assert body["imageUrl"] == f"/uploads/photos/{body['filename']}"
    assert (photos_dir / body["filename"]).read_bytes() == png_bytes

    listed = client.get("/api/v1/photos", params={"sessionId": 1}).json()
    assert [p["id"] for p in listed] == [body["photoId"]]

    # Base64 upload to a session that does not exist
    response = client.post(
        "/api/v1/upload/base64",
        json={"imageData": f"data:image/png;base64,{png_base64}", "sessionId": 99},
    )
    assert response.status_code == 404
    failed = response.json()
    assert failed["success"] is False
    assert (photos_dir / failed["filename"]).exists()
    assert len(client.get("/api/v1/photos").json()) == 1

    # Empty multipart body
    response = client.post(
        "/api/v1/upload/file",
        files={"file": ("empty.png", b"", "image/png")},
        data={"sessionId": "1"},
    )
    assert response.status_code == 400
    assert len(list(photos_dir.iterdir())) == 2
