"""
Session CRUD operations.

Provides Create, Read, Delete operations for SessionModel with
session-specific query methods: detailed loading of the owning user and
photos, per-user listing, and the session → photos cascade.

Dependencies: sqlalchemy, photobooth.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence

from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from photobooth.boundary.db.models.session_model import SessionModel
from photobooth.boundary.db.CRUD.base_crud import BaseCRUD
from photobooth.boundary.db.CRUD.photo_crud import PhotoCRUD, photo_crud


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with eager loading of the owning user and photos,
    and an explicit cascade delete.
    """

    def __init__(self, photos: PhotoCRUD = photo_crud) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)
        self.photos = photos

    async def get_with_details(
        self,
        session: AsyncSession,
        id: int,
    ) -> SessionModel | None:
        """
        Retrieve session with its user and photos eagerly loaded.

        Both associations are loaded within the caller's transaction so they
        reflect the same snapshot.

        Args:
            session: Async database session
            id: Session id

        Returns:
            SessionModel with user and photos loaded, None if not found
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.id == id)
            .options(
                joinedload(SessionModel.user),
                selectinload(SessionModel.photos),
            )
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(
        self,
        session: AsyncSession,
        user_id: int,
    ) -> Sequence[SessionModel]:
        """
        Retrieve all sessions for a user, newest first.

        Args:
            session: Async database session
            user_id: Owning user id

        Returns:
            Sequence of SessionModels ordered by created_at descending
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.user_id == user_id)
            .order_by(desc(SessionModel.created_at), desc(SessionModel.id))
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_ids_by_user_id(
        self,
        session: AsyncSession,
        user_id: int,
    ) -> list[int]:
        """
        Retrieve the ids of all sessions owned by a user.

        Args:
            session: Async database session
            user_id: Owning user id

        Returns:
            list[int]: Session ids
        """
        stmt = select(SessionModel.id).where(SessionModel.user_id == user_id)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def delete_with_photos(self, session: AsyncSession, id: int) -> dict[str, int]:
        """
        Delete a session and every photo in it.

        Photos go first so the statement order is valid even where the
        database does not enforce ON DELETE CASCADE (e.g. SQLite without
        foreign key pragmas). Does not commit.

        Args:
            session: Async database session
            id: Session id

        Returns:
            dict: Row counts {"sessions": 0|1, "photos": n}
        """
        photos_deleted = await self.photos.delete_by_session_ids(session, [id])
        deleted = await self.delete_by_id(session, id)
        return {"sessions": int(deleted), "photos": photos_deleted}


session_crud = SessionCRUD()
