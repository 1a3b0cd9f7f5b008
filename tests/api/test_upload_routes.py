"""
Router tests for the upload endpoints.

Upload failures keep the upload result shape (success=false plus error),
so both success and failure bodies are asserted here.

System role: Verification of the upload HTTP API
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from photobooth.api.deps.dependencies import get_upload_service
from photobooth.api.main import create_app
from photobooth.application.services.upload_service import UploadResult
from photobooth.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    StorageFaultError,
    UploadLinkError,
)


@pytest.fixture
def client(mock_upload_service: AsyncMock):
    app = create_app()
    app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def _ok(photo_id=None) -> UploadResult:
    return UploadResult(
        success=True,
        image_url="/uploads/photos/abc.png",
        filename="abc.png",
        photo_id=photo_id,
    )


class TestBase64Upload:

    def test_success(self, client, mock_upload_service, png_base64):
        mock_upload_service.upload_base64.return_value = _ok(photo_id=3)

        response = client.post(
            "/api/v1/upload/base64",
            json={"imageData": png_base64, "sessionId": 1, "extension": "png"},
        )

        assert response.status_code == 201
        assert response.json() == {
            "success": True,
            "imageUrl": "/uploads/photos/abc.png",
            "filename": "abc.png",
            "photoId": 3,
            "error": None,
        }
        mock_upload_service.upload_base64.assert_awaited_once_with(
            image_data=png_base64, extension="png", session_id=1
        )

    def test_missing_image_data_is_400(self, client):
        response = client.post("/api/v1/upload/base64", json={"sessionId": 1})

        assert response.status_code == 400

    def test_malformed_base64_is_400_with_upload_shape(self, client, mock_upload_service):
        mock_upload_service.upload_base64.side_effect = InvalidInputError("Invalid base64 data: bad")

        response = client.post("/api/v1/upload/base64", json={"imageData": "%%%"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Invalid base64 data: bad"
        assert body["imageUrl"] is None

    def test_link_failure_is_404_and_names_saved_file(self, client, mock_upload_service):
        mock_upload_service.upload_base64.side_effect = UploadLinkError(
            NotFoundError("Session", 77), "abc.png", "/uploads/photos/abc.png"
        )

        response = client.post(
            "/api/v1/upload/base64",
            json={"imageData": "AAAA", "sessionId": 77},
        )

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["imageUrl"] == "/uploads/photos/abc.png"
        assert body["filename"] == "abc.png"
        assert "Session not found with id: 77" in body["error"]
        assert "/uploads/photos/abc.png" in body["error"]

    def test_database_link_failure_is_500_and_names_saved_file(self, client, mock_upload_service):
        cause = IntegrityError("INSERT INTO photos", {}, Exception("FK violation"))
        mock_upload_service.upload_base64.side_effect = UploadLinkError(
            cause, "abc.png", "/uploads/photos/abc.png"
        )

        response = client.post(
            "/api/v1/upload/base64",
            json={"imageData": "AAAA", "sessionId": 7},
        )

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["imageUrl"] == "/uploads/photos/abc.png"
        assert body["filename"] == "abc.png"
        assert "/uploads/photos/abc.png" in body["error"]
        assert "INSERT" not in body["error"]

    def test_unexpected_error_hides_internals(self, client, mock_upload_service):
        mock_upload_service.upload_base64.side_effect = RuntimeError("[SQL: SELECT 1]")

        response = client.post("/api/v1/upload/base64", json={"imageData": "AAAA"})

        assert response.status_code == 500
        assert response.json()["error"] == "Upload failed due to an internal error"

    def test_storage_fault_is_500(self, client, mock_upload_service):
        mock_upload_service.upload_base64.side_effect = StorageFaultError("Failed to save file: disk full")

        response = client.post("/api/v1/upload/base64", json={"imageData": "AAAA"})

        assert response.status_code == 500
        assert response.json()["success"] is False


class TestFileUpload:

    def test_success_with_session(self, client, mock_upload_service, png_bytes):
        mock_upload_service.upload_file.return_value = _ok(photo_id=5)

        response = client.post(
            "/api/v1/upload/file",
            files={"file": ("selfie.png", png_bytes, "image/png")},
            data={"sessionId": "2"},
        )

        assert response.status_code == 201
        assert response.json()["photoId"] == 5
        mock_upload_service.upload_file.assert_awaited_once_with(
            content=png_bytes, original_filename="selfie.png", session_id=2
        )

    def test_success_without_session(self, client, mock_upload_service, png_bytes):
        mock_upload_service.upload_file.return_value = _ok()

        response = client.post(
            "/api/v1/upload/file",
            files={"file": ("selfie.png", png_bytes, "image/png")},
        )

        assert response.status_code == 201
        assert mock_upload_service.upload_file.await_args.kwargs["session_id"] is None

    def test_empty_file_is_400(self, client, mock_upload_service):
        mock_upload_service.upload_file.side_effect = InvalidInputError("Uploaded file is empty")

        response = client.post(
            "/api/v1/upload/file",
            files={"file": ("empty.png", b"", "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Uploaded file is empty"

    def test_missing_file_field_is_400(self, client):
        response = client.post("/api/v1/upload/file", data={"sessionId": "1"})

        assert response.status_code == 400
