"""
Upload ingestion pipeline.

Turns base64 text or raw multipart bytes into a stored file and, when a
session id is given, a photo row pointing at it.

The file write and the photo insert are separate resources. If linking fails
after the write, the file is kept and the error names it.

Dependencies: photobooth.boundary.storage, photobooth.application.services.photo_service
System role: Upload use case orchestration
"""

import asyncio
import base64
import binascii
import logging
import re
from dataclasses import asdict, dataclass
from pathlib import PurePath

from photobooth.application.services.photo_service import PhotoService
from photobooth.boundary.storage import LocalPhotoStorage
from photobooth.core.exceptions import InvalidInputError, UploadLinkError
from photobooth.observability.log_utils import log_upload, log_upload_failure

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "png"
_EXTENSION_PATTERN = re.compile(r"^[A-Za-z0-9]{1,10}$")


@dataclass
class UploadResult:
    """Outcome of an upload, serialized as the upload response body."""

    success: bool
    image_url: str | None = None
    filename: str | None = None
    photo_id: int | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


def decode_base64_image(image_data: str) -> bytes:
    """
    Decode base64 image text, tolerating a data-URL prefix.

    Everything up to and including the first comma is discarded, so
    "data:image/png;base64,AAAA" and "AAAA" decode to the same bytes.
    Missing trailing padding is restored before the strict decode.

    Args:
        image_data: Base64 payload, optionally data-URL prefixed

    Returns:
        bytes: Decoded image bytes

    Raises:
        InvalidInputError: If the payload is not valid base64
    """
    payload = image_data.split(",", 1)[1] if "," in image_data else image_data
    payload = payload.strip()
    # Senders may drop the trailing "=" padding
    payload += "=" * (-len(payload) % 4)
    try:
        content = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError(f"Invalid base64 data: {e}", field="imageData") from e
    if not content:
        raise InvalidInputError("Image data is empty", field="imageData")
    return content


def normalize_extension(extension: str | None) -> str:
    """
    Validate a file extension and return it lower-cased without the dot.

    Missing or blank extensions fall back to png.

    Raises:
        InvalidInputError: If the extension is not 1-10 ASCII letters or digits
    """
    if extension is None or not extension.strip():
        return DEFAULT_EXTENSION
    ext = extension.strip()
    if ext.startswith("."):
        ext = ext[1:]
    if not _EXTENSION_PATTERN.match(ext):
        raise InvalidInputError(f"Invalid file extension: {extension!r}", field="extension")
    return ext.lower()


def extension_from_filename(filename: str | None) -> str:
    """Take the last suffix of an uploaded filename, png when there is none."""
    if not filename:
        return DEFAULT_EXTENSION
    return normalize_extension(PurePath(filename).suffix or None)


class UploadService:
    """Upload pipeline orchestrator."""

    def __init__(self, storage: LocalPhotoStorage, photo_service: PhotoService) -> None:
        """
        Args:
            storage: Destination for file bytes
            photo_service: Used to link a stored file to a session
        """
        self.storage = storage
        self.photo_service = photo_service

    async def upload_base64(
        self,
        image_data: str,
        extension: str | None = None,
        session_id: int | None = None,
    ) -> UploadResult:
        """
        Store a base64 encoded image.

        Args:
            image_data: Base64 payload, optionally data-URL prefixed
            extension: File extension, png when omitted
            session_id: Session to attach the photo to

        Returns:
            UploadResult: success result with URL, filename and photo id

        Raises:
            InvalidInputError: Malformed base64 or bad extension
            StorageFaultError: File could not be written
            UploadLinkError: File saved but the photo record could not be created
        """
        ext = normalize_extension(extension)
        content = decode_base64_image(image_data)
        return await self._store_and_link(content, ext, session_id, source="base64")

    async def upload_file(
        self,
        content: bytes,
        original_filename: str | None,
        session_id: int | None = None,
    ) -> UploadResult:
        """
        Store raw uploaded file bytes.

        Empty bodies are rejected before anything touches the filesystem.

        Args:
            content: Raw file bytes
            original_filename: Client filename, used only for its extension
            session_id: Session to attach the photo to

        Returns:
            UploadResult: success result with URL, filename and photo id

        Raises:
            InvalidInputError: Empty file or bad extension
            StorageFaultError: File could not be written
            UploadLinkError: File saved but the photo record could not be created
        """
        if not content:
            raise InvalidInputError("Uploaded file is empty", field="file")
        ext = extension_from_filename(original_filename)
        return await self._store_and_link(content, ext, session_id, source="multipart")

    async def _store_and_link(
        self,
        content: bytes,
        extension: str,
        session_id: int | None,
        source: str,
    ) -> UploadResult:
        stored = await asyncio.to_thread(self.storage.save, content, extension)

        photo_id: int | None = None
        if session_id is not None:
            try:
                photo = await self.photo_service.create_photo_from_upload(
                    session_id, stored.url
                )
            except Exception as e:
                log_upload_failure(
                    logger,
                    "Upload stored but photo link failed",
                    e,
                    source=source,
                    stored_file=stored.filename,
                    session_id=session_id,
                )
                raise UploadLinkError(e, stored.filename, stored.url) from e
            photo_id = photo["id"]

        log_upload(
            logger,
            logging.INFO,
            "Upload completed",
            source=source,
            stored_file=stored.filename,
            session_id=session_id,
            photo_id=photo_id,
        )
        return UploadResult(
            success=True,
            image_url=stored.url,
            filename=stored.filename,
            photo_id=photo_id,
        )
