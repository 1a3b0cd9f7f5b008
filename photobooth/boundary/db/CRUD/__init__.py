"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from photobooth.boundary.db.CRUD import user_crud, session_crud, photo_crud

    # Use singleton instances
    user = await user_crud.get_by_id(db, user_id)

    # Or instantiate classes directly for custom behavior
    from photobooth.boundary.db.CRUD import SessionCRUD
    custom_crud = SessionCRUD()
"""

from photobooth.boundary.db.CRUD.base_crud import BaseCRUD
from photobooth.boundary.db.CRUD.photo_crud import PhotoCRUD, photo_crud
from photobooth.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from photobooth.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "SessionCRUD",
    "session_crud",
    "PhotoCRUD",
    "photo_crud",
]
