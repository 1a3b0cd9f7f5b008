"""
User CRUD operations.

Provides Create, Read, Delete operations for UserModel, the name lookup
and the user → sessions → photos cascade.

Dependencies: sqlalchemy, photobooth.boundary.db.models
System role: Identity store persistence operations
"""

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from photobooth.boundary.db.models.session_model import SessionModel
from photobooth.boundary.db.models.user_model import UserModel
from photobooth.boundary.db.CRUD.base_crud import BaseCRUD
from photobooth.boundary.db.CRUD.session_crud import SessionCRUD, session_crud


class UserCRUD(BaseCRUD[UserModel]):
    """CRUD operations for UserModel."""

    def __init__(self, sessions: SessionCRUD = session_crud) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)
        self.sessions = sessions

    async def exists_by_name(self, session: AsyncSession, name: str) -> bool:
        """
        Check whether any user has exactly this name.

        Args:
            session: Async database session
            name: Display name to look up

        Returns:
            True if at least one user has the name
        """
        stmt = select(UserModel.id).where(UserModel.name == name).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def delete_with_sessions(self, session: AsyncSession, id: int) -> dict[str, int]:
        """
        Delete a user, all of their sessions and all photos in those sessions.

        Child ids are collected first, then rows are removed bottom-up:
        photos, sessions, user. Does not commit.

        Args:
            session: Async database session
            id: User id

        Returns:
            dict: Row counts {"users": 0|1, "sessions": n, "photos": m}
        """
        session_ids = await self.sessions.get_ids_by_user_id(session, id)
        photos_deleted = await self.sessions.photos.delete_by_session_ids(session, session_ids)

        sessions_deleted = 0
        if session_ids:
            result = await session.execute(
                delete(SessionModel).where(SessionModel.id.in_(session_ids))
            )
            sessions_deleted = result.rowcount

        deleted = await self.delete_by_id(session, id)
        return {
            "users": int(deleted),
            "sessions": sessions_deleted,
            "photos": photos_deleted,
        }


user_crud = UserCRUD()
