"""
Photo CRUD operations.

Provides Create, Read, Delete operations for PhotoModel with
session filtering and newest-first ordering.

Dependencies: sqlalchemy, photobooth.boundary.db.models
System role: Photo persistence operations
"""

from typing import Sequence

from sqlalchemy import select, delete, desc
from sqlalchemy.ext.asyncio import AsyncSession

from photobooth.boundary.db.models.photo_model import PhotoModel
from photobooth.boundary.db.CRUD.base_crud import BaseCRUD


class PhotoCRUD(BaseCRUD[PhotoModel]):
    """
    CRUD operations for PhotoModel.

    Extends BaseCRUD with photo-specific queries for filtering by session
    and bulk deletion used by session/user cascades.
    """

    def __init__(self) -> None:
        """Initialize PhotoCRUD with PhotoModel."""
        super().__init__(PhotoModel)

    async def get_by_session_id(
        self,
        session: AsyncSession,
        session_id: int,
    ) -> Sequence[PhotoModel]:
        """
        Retrieve all photos for a session, ordered by creation (newest first).

        Args:
            session: Async database session
            session_id: Parent session id

        Returns:
            Sequence of PhotoModels belonging to the session, newest first
        """
        stmt = (
            select(PhotoModel)
            .where(PhotoModel.session_id == session_id)
            .order_by(desc(PhotoModel.created_at), desc(PhotoModel.id))
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_session_ids(
        self,
        session: AsyncSession,
        session_ids: Sequence[int],
    ) -> int:
        """
        Delete every photo belonging to any of the given sessions.

        Args:
            session: Async database session
            session_ids: Parent session ids

        Returns:
            int: Number of photo rows deleted
        """
        if not session_ids:
            return 0
        stmt = delete(PhotoModel).where(PhotoModel.session_id.in_(session_ids))
        result = await session.execute(stmt)
        return result.rowcount


photo_crud = PhotoCRUD()
