"""
User service orchestrator.

Coordinates user lifecycle operations: create, list, read and the
cascading delete of a user's sessions and photos.

Dependencies: photobooth.boundary.db.CRUD, photobooth.core.exceptions
System role: User use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from photobooth.application.services.representations import user_to_dict
from photobooth.boundary.db.CRUD.user_crud import user_crud
from photobooth.boundary.db.models import UserModel
from photobooth.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize user service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_user(self, name: str) -> dict:
        """
        Create a new user.

        Name constraints (non-blank, at most 255 chars) are enforced by the
        request schema. Names are not unique.

        Args:
            name: Display name

        Returns:
            dict: User data with id, name, created_at

        Raises:
            Exception: If database operation fails
        """
        try:
            user = await user_crud.create(self.db, name=name)
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error("Failed to create user", extra={"error": str(e)})
            raise

        logger.info("User created", extra={"user_id": user.id})
        return user_to_dict(user)

    async def list_users(self) -> list[dict]:
        """
        Get all users, newest first.

        Returns:
            list[dict]: User dicts ordered by created_at descending
        """
        users = await user_crud.get_all(self.db)
        return [user_to_dict(u) for u in users]

    async def get_user(self, user_id: int) -> dict:
        """
        Get user by ID.

        Args:
            user_id: User id

        Returns:
            dict: User data

        Raises:
            NotFoundError: If user not found
        """
        return user_to_dict(await self.get_user_entity(user_id))

    async def get_user_entity(self, user_id: int) -> UserModel:
        """
        Resolve a user row for parent validation by other services.

        Args:
            user_id: User id

        Returns:
            UserModel: The user row

        Raises:
            NotFoundError: If user not found
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def user_exists_by_name(self, name: str) -> bool:
        """
        Check whether a user with this exact name exists.

        Not called by create_user; callers that want unique names check first.

        Args:
            name: Display name

        Returns:
            bool: True if at least one user has the name
        """
        return await user_crud.exists_by_name(self.db, name)

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user together with all of their sessions and photos.

        Existence check and the multi-row delete share one transaction.

        Args:
            user_id: User id

        Raises:
            NotFoundError: If user not found
        """
        try:
            await self.get_user_entity(user_id)
            counts = await user_crud.delete_with_sessions(self.db, user_id)
            await self.db.commit()
        except NotFoundError:
            await self.db.rollback()
            raise
        except Exception as e:
            await self.db.rollback()
            logger.error(
                "Failed to delete user",
                extra={"error": str(e), "user_id": user_id},
            )
            raise

        logger.info(
            "User deleted",
            extra={
                "user_id": user_id,
                "sessions_deleted": counts["sessions"],
                "photos_deleted": counts["photos"],
            },
        )
