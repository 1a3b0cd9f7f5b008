"""
User API endpoints.

Routes:
- POST /users - Create new user
- GET /users - List all users
- GET /users/{id} - Get single user
- GET /users/{id}/sessions - List the user's sessions
- DELETE /users/{id} - Delete user with all sessions and photos

Dependencies: photobooth.application.services, photobooth.models
System role: User management HTTP API
"""

from fastapi import APIRouter, Depends, status

from photobooth.api.deps.dependencies import get_session_service, get_user_service
from photobooth.api.routers.router_utils import handle_service_errors
from photobooth.application.services.session_service import SessionService
from photobooth.application.services.user_service import UserService
from photobooth.models.common import ErrorResponse
from photobooth.models.session import SessionResponse
from photobooth.models.user import CreateUserRequest, UserResponse

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create new user.

    Args:
        request: CreateUserRequest with name
        user_service: Injected UserService

    Returns:
        UserResponse: Created user

    Raises:
        HTTPException(400): Invalid request
        HTTPException(500): Creation failed
    """
    user = await user_service.create_user(name=request.name)
    return UserResponse(**user)


@router.get("", response_model=list[UserResponse])
@handle_service_errors
async def list_users(
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List all users, newest first."""
    users = await user_service.list_users()
    return [UserResponse(**u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def get_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Get single user by ID.

    Raises:
        HTTPException(404): User not found
    """
    user = await user_service.get_user(user_id)
    return UserResponse(**user)


@router.get("/{user_id}/sessions", response_model=list[SessionResponse])
@handle_service_errors
async def list_user_sessions(
    user_id: int,
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionResponse]:
    """
    List a user's sessions, newest first.

    Raises:
        HTTPException(404): User not found
    """
    sessions = await session_service.list_sessions_for_user(user_id)
    return [SessionResponse(**s) for s in sessions]


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_service_errors
async def delete_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> None:
    """
    Delete user together with all of their sessions and photos.

    Raises:
        HTTPException(404): User not found
    """
    await user_service.delete_user(user_id)
