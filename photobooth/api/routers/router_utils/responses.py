"""
Upload response helpers.

Upload endpoints answer failures with the upload result shape instead of
{"detail": ...}, so their error mapping lives here rather than in
handle_service_errors.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from photobooth.core.exceptions import (
    InvalidInputError,
    NotFoundError,
    StorageFaultError,
    UploadLinkError,
)
from photobooth.models.upload import UploadResponse

logger = logging.getLogger(__name__)


def upload_failure(status_code: int, error: str, **fields) -> JSONResponse:
    """Build a failed upload result response."""
    body = UploadResponse(success=False, error=error, **fields)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, mode="json"),
    )


def upload_error_response(exc: Exception) -> JSONResponse:
    """
    Map an upload pipeline exception to a failed upload result.

    Link failures name the saved file in imageUrl, filename and error.
    Unexpected errors are logged in full and answered with a generic message.

    Args:
        exc: Exception raised by UploadService

    Returns:
        JSONResponse: 400, 404 or 500 with success=false
    """
    if isinstance(exc, UploadLinkError):
        status_code = (
            status.HTTP_404_NOT_FOUND
            if exc.is_not_found
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        logger.warning(
            "Upload saved without photo link",
            extra={
                "image_url": exc.image_url,
                "error": str(exc),
                "cause": repr(exc.cause),
            },
        )
        return upload_failure(
            status_code,
            str(exc),
            image_url=exc.image_url,
            filename=exc.filename,
        )
    if isinstance(exc, NotFoundError):
        logger.warning("Upload target not found", extra={"error": str(exc)})
        return upload_failure(status.HTTP_404_NOT_FOUND, str(exc))
    if isinstance(exc, InvalidInputError):
        logger.warning("Invalid upload", extra={"error": str(exc)})
        return upload_failure(status.HTTP_400_BAD_REQUEST, str(exc))
    if isinstance(exc, StorageFaultError):
        logger.error("Upload storage failure", extra={"error": str(exc)})
        return upload_failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    logger.exception("Unexpected failure in upload", extra={"error": str(exc)})
    return upload_failure(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Upload failed due to an internal error",
    )
