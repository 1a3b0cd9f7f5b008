"""
Session service orchestrator.

Coordinates session lifecycle operations. Every session needs an existing
user, resolved through UserService before anything is written.

Dependencies: photobooth.boundary.db.CRUD, photobooth.application.services.user_service
System role: Session use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from photobooth.application.services.representations import session_to_dict
from photobooth.application.services.user_service import UserService
from photobooth.boundary.db.CRUD.session_crud import session_crud
from photobooth.boundary.db.models import SessionModel
from photobooth.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession, user_service: UserService | None = None) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
            user_service: Service used to validate the owning user; defaults
                to one bound to the same session so validation and insert
                share a transaction
        """
        self.db = db
        self.user_service = user_service or UserService(db)

    async def create_session(self, user_id: int) -> dict:
        """
        Create new session for an existing user.

        Args:
            user_id: Owning user id

        Returns:
            dict: Session data with id, user_id, created_at and an empty photo list

        Raises:
            NotFoundError: If the user does not exist (nothing is written)
        """
        try:
            user = await self.user_service.get_user_entity(user_id)
            session = await session_crud.create(self.db, user_id=user.id)
            await self.db.commit()
        except NotFoundError:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create session",
                extra={"error": str(e), "user_id": user_id},
            )
            raise

        logger.info(
            "Session created",
            extra={"session_id": session.id, "user_id": user_id},
        )
        return session_to_dict(session)

    async def get_session_detailed(self, session_id: int) -> dict:
        """
        Get session with its photos embedded.

        The session, its user and its photos are read with one statement
        in one transaction.

        Args:
            session_id: Session id

        Returns:
            dict: Session data with photos ordered newest first

        Raises:
            NotFoundError: If session not found
        """
        session = await session_crud.get_with_details(self.db, session_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        return session_to_dict(session, session.photos)

    async def get_session_entity(self, session_id: int) -> SessionModel:
        """
        Resolve a session row for parent validation by other services.

        Args:
            session_id: Session id

        Returns:
            SessionModel: The session row, photos not loaded

        Raises:
            NotFoundError: If session not found
        """
        session = await session_crud.get_by_id(self.db, session_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        return session

    async def list_sessions_for_user(self, user_id: int) -> list[dict]:
        """
        Get a user's sessions, newest first.

        Args:
            user_id: Owning user id

        Returns:
            list[dict]: Session dicts (photos not embedded)

        Raises:
            NotFoundError: If user not found
        """
        await self.user_service.get_user_entity(user_id)
        sessions = await session_crud.get_by_user_id(self.db, user_id)
        return [session_to_dict(s) for s in sessions]

    async def delete_session(self, session_id: int) -> None:
        """
        Delete session and every photo in it.

        Args:
            session_id: Session id

        Raises:
            NotFoundError: If session not found
        """
        try:
            await self.get_session_entity(session_id)
            counts = await session_crud.delete_with_photos(self.db, session_id)
            await self.db.commit()
        except NotFoundError:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete session",
                extra={"error": str(e), "session_id": session_id},
            )
            raise

        logger.info(
            "Session deleted",
            extra={"session_id": session_id, "photos_deleted": counts["photos"]},
        )
