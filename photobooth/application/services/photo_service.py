"""
Photo service orchestrator.

Coordinates photo operations. Every photo needs an existing session,
resolved through SessionService before the row is written.

Dependencies: photobooth.boundary.db.CRUD, photobooth.application.services.session_service
System role: Photo use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from photobooth.application.services.representations import photo_to_dict
from photobooth.application.services.session_service import SessionService
from photobooth.boundary.db.CRUD.photo_crud import photo_crud
from photobooth.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class PhotoService:
    """Photo service orchestrator."""

    def __init__(self, db: AsyncSession, session_service: SessionService | None = None) -> None:
        """
        Initialize photo service with async database session.

        Args:
            db: Async SQLAlchemy session
            session_service: Service used to validate the parent session
        """
        self.db = db
        self.session_service = session_service or SessionService(db)

    async def create_photo(self, session_id: int, image_url: str) -> dict:
        """
        Create a photo for an existing session.

        Args:
            session_id: Parent session id
            image_url: Image URL (validated by the request schema)

        Returns:
            dict: Photo data with id, session_id, image_url, created_at

        Raises:
            NotFoundError: If the session does not exist (nothing is written)
        """
        return await self._create(session_id, image_url, source="request")

    async def create_photo_from_upload(self, session_id: int, image_url: str) -> dict:
        """
        Register an already stored upload as a photo of a session.

        Same contract as create_photo; called by the upload pipeline after
        the file has been written.

        Args:
            session_id: Parent session id
            image_url: Public URL of the stored file

        Returns:
            dict: Photo data

        Raises:
            NotFoundError: If the session does not exist
        """
        return await self._create(session_id, image_url, source="upload")

    async def _create(self, session_id: int, image_url: str, source: str) -> dict:
        try:
            session = await self.session_service.get_session_entity(session_id)
            photo = await photo_crud.create(
                self.db,
                session_id=session.id,
                image_url=image_url,
            )
            await self.db.commit()
        except NotFoundError:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to create photo",
                extra={"error": str(e), "session_id": session_id, "source": source},
            )
            raise

        logger.info(
            "Photo created",
            extra={"photo_id": photo.id, "session_id": session_id, "source": source},
        )
        return photo_to_dict(photo)

    async def list_photos(self, session_id: int | None = None) -> list[dict]:
        """
        Get photos, newest first, optionally limited to one session.

        Args:
            session_id: Session filter; None returns every photo

        Returns:
            list[dict]: Photo dicts ordered by created_at descending

        Raises:
            NotFoundError: If a session filter is given and the session does not exist
        """
        if session_id is None:
            photos = await photo_crud.get_all(self.db)
        else:
            await self.session_service.get_session_entity(session_id)
            photos = await photo_crud.get_by_session_id(self.db, session_id)
        return [photo_to_dict(p) for p in photos]

    async def get_photo(self, photo_id: int) -> dict:
        """
        Get photo by ID.

        Raises:
            NotFoundError: If photo not found
        """
        photo = await photo_crud.get_by_id(self.db, photo_id)
        if photo is None:
            raise NotFoundError("Photo", photo_id)
        return photo_to_dict(photo)

    async def delete_photo(self, photo_id: int) -> None:
        """
        Delete a single photo.

        Raises:
            NotFoundError: If photo not found
        """
        try:
            deleted = await photo_crud.delete_by_id(self.db, photo_id)
            if not deleted:
                raise NotFoundError("Photo", photo_id)
            await self.db.commit()
        except NotFoundError:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete photo",
                extra={"error": str(e), "photo_id": photo_id},
            )
            raise

        logger.info("Photo deleted", extra={"photo_id": photo_id})
