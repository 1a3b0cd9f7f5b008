"""
Session API endpoints.

Routes:
- POST /sessions - Create session for a user
- GET /sessions/{id} - Get session with its photos
- DELETE /sessions/{id} - Delete session and its photos

Dependencies: photobooth.application.services, photobooth.models
System role: Session management HTTP API
"""

from fastapi import APIRouter, Depends, status

from photobooth.api.deps.dependencies import get_session_service
from photobooth.api.routers.router_utils import handle_service_errors
from photobooth.application.services.session_service import SessionService
from photobooth.models.common import ErrorResponse
from photobooth.models.session import CreateSessionRequest, SessionResponse

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_session(
    request: CreateSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Create new session for an existing user.

    Args:
        request: CreateSessionRequest with userId
        session_service: Injected SessionService

    Returns:
        SessionResponse: Created session with an empty photo list

    Raises:
        HTTPException(404): User not found
    """
    session = await session_service.create_session(user_id=request.user_id)
    return SessionResponse(**session)


@router.get("/{session_id}", response_model=SessionResponse)
@handle_service_errors
async def get_session(
    session_id: int,
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Get session with its photos embedded, newest first.

    Raises:
        HTTPException(404): Session not found
    """
    session = await session_service.get_session_detailed(session_id)
    return SessionResponse(**session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_session(
    session_id: int,
    session_service: SessionService = Depends(get_session_service),
) -> None:
    """Delete session and all of its photos."""
    await session_service.delete_session(session_id)
