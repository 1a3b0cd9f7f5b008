"""
Local photo storage.

Writes uploaded image bytes under a configured directory with generated
names and exposes the public URL they are served from.

Dependencies: os, tempfile, uuid (stdlib)
System role: Filesystem boundary for the upload pipeline
"""

import logging
import os
import tempfile
import uuid
from dataclasses import dataclass
from pathlib import Path

from photobooth.core.exceptions import StorageFaultError

logger = logging.getLogger(__name__)

FILE_MODE = 0o644


@dataclass(frozen=True)
class StoredFile:
    """A file written by LocalPhotoStorage."""

    filename: str
    path: Path
    url: str


class LocalPhotoStorage:
    """Stores photo files in a directory served under a public URL prefix."""

    def __init__(self, directory: Path | str, public_url_prefix: str) -> None:
        """
        Args:
            directory: Destination directory, created on first save
            public_url_prefix: URL prefix the directory is served at,
                e.g. "/uploads/photos"
        """
        self.directory = Path(directory)
        self.public_url_prefix = public_url_prefix.rstrip("/")

    def ensure_directory(self) -> None:
        """Create the destination directory if missing (idempotent)."""
        self.directory.mkdir(parents=True, exist_ok=True)

    def url_for(self, filename: str) -> str:
        return f"{self.public_url_prefix}/{filename}"

    def save(self, content: bytes, extension: str) -> StoredFile:
        """
        Write bytes to a new uniquely named file.

        The bytes go to a temporary file in the destination directory which
        is then renamed into place, so a reader never sees a partial file.

        Args:
            content: Raw image bytes
            extension: Validated file extension without the dot

        Returns:
            StoredFile: Generated filename, absolute path and public URL

        Raises:
            StorageFaultError: If the directory or file cannot be written
        """
        filename = f"{uuid.uuid4()}.{extension}"
        target = self.directory / filename
        tmp_path: str | None = None

        try:
            self.ensure_directory()
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=".upload-", suffix=".tmp")
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
            # mkstemp creates 0600; stored photos are served by other processes
            os.chmod(tmp_path, FILE_MODE)
            os.replace(tmp_path, target)
            tmp_path = None
        except OSError as e:
            logger.error(
                "Failed to write photo file",
                extra={"path": str(target), "error": str(e)},
            )
            raise StorageFaultError(f"Failed to save file: {e}", path=str(target)) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.info(
            "Photo file stored",
            extra={"photo_filename": filename, "size_bytes": len(content)},
        )
        return StoredFile(filename=filename, path=target, url=self.url_for(filename))
