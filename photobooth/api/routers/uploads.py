"""
Upload API endpoints.

Routes:
- POST /upload/base64 - Ingest base64 encoded image
- POST /upload/file - Ingest multipart image

Both answer with the upload result shape, on failure too.

Dependencies: photobooth.application.services.upload_service, photobooth.models
System role: Upload ingestion HTTP API
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from fastapi.responses import JSONResponse

from photobooth.api.deps.dependencies import get_upload_service
from photobooth.api.routers.router_utils import upload_error_response
from photobooth.application.services.upload_service import UploadService
from photobooth.models.upload import Base64UploadRequest, UploadResponse

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post(
    "/base64",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_base64(
    request: Base64UploadRequest,
    upload_service: UploadService = Depends(get_upload_service),
) -> UploadResponse | JSONResponse:
    """
    Store a base64 image and optionally attach it to a session.

    Args:
        request: Base64UploadRequest with imageData, sessionId, extension
        upload_service: Injected UploadService

    Returns:
        UploadResponse: success=true with imageUrl, filename, photoId

    Failures return the same shape with success=false:
        400 malformed base64 or extension, 404 session missing (file kept),
        500 write failure
    """
    try:
        result = await upload_service.upload_base64(
            image_data=request.image_data,
            extension=request.extension,
            session_id=request.session_id,
        )
    except Exception as e:
        return upload_error_response(e)
    return UploadResponse(**result.to_dict())


@router.post(
    "/file",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_file(
    file: UploadFile = File(...),
    session_id: int | None = Form(None, alias="sessionId"),
    upload_service: UploadService = Depends(get_upload_service),
) -> UploadResponse | JSONResponse:
    """
    Store a multipart image and optionally attach it to a session.

    Args:
        file: Uploaded file; only its filename suffix and bytes are used
        session_id: Optional form field sessionId
        upload_service: Injected UploadService

    Failures return the upload result shape with success=false:
        400 empty file, 404 session missing (file kept), 500 write failure
    """
    try:
        content = await file.read()
        result = await upload_service.upload_file(
            content=content,
            original_filename=file.filename,
            session_id=session_id,
        )
    except Exception as e:
        return upload_error_response(e)
    finally:
        await file.close()
    return UploadResponse(**result.to_dict())
