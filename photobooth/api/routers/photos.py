"""
Photo API endpoints.

Routes:
- POST /photos - Register photo by URL
- GET /photos - List photos, optionally filtered by ?sessionId=
- GET /photos/{id} - Get single photo
- DELETE /photos/{id} - Delete photo

Dependencies: photobooth.application.services, photobooth.models
System role: Photo management HTTP API
"""

from fastapi import APIRouter, Depends, Query, status

from photobooth.api.deps.dependencies import get_photo_service
from photobooth.api.routers.router_utils import handle_service_errors
from photobooth.application.services.photo_service import PhotoService
from photobooth.models.common import ErrorResponse
from photobooth.models.photo import CreatePhotoRequest, PhotoResponse

router = APIRouter(
    prefix="/photos",
    tags=["photos"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_photo(
    request: CreatePhotoRequest,
    photo_service: PhotoService = Depends(get_photo_service),
) -> PhotoResponse:
    """
    Register a photo for an existing session.

    Args:
        request: CreatePhotoRequest with sessionId and imageUrl
        photo_service: Injected PhotoService

    Returns:
        PhotoResponse: Created photo

    Raises:
        HTTPException(404): Session not found
    """
    photo = await photo_service.create_photo(
        session_id=request.session_id,
        image_url=request.image_url,
    )
    return PhotoResponse(**photo)


@router.get("", response_model=list[PhotoResponse])
@handle_service_errors
async def list_photos(
    session_id: int | None = Query(None, alias="sessionId"),
    photo_service: PhotoService = Depends(get_photo_service),
) -> list[PhotoResponse]:
    """
    List photos newest first.

    Args:
        session_id: Optional session filter (?sessionId=)
        photo_service: Injected PhotoService

    Raises:
        HTTPException(404): Filter session not found
    """
    photos = await photo_service.list_photos(session_id=session_id)
    return [PhotoResponse(**p) for p in photos]


@router.get("/{photo_id}", response_model=PhotoResponse)
@handle_service_errors
async def get_photo(
    photo_id: int,
    photo_service: PhotoService = Depends(get_photo_service),
) -> PhotoResponse:
    """Get single photo by ID."""
    photo = await photo_service.get_photo(photo_id)
    return PhotoResponse(**photo)


@router.delete("/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_photo(
    photo_id: int,
    photo_service: PhotoService = Depends(get_photo_service),
) -> None:
    """Delete single photo."""
    await photo_service.delete_photo(photo_id)
