"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IdentityMixin, CreatedAtMixin: Model building blocks
  - get_engine(): Sync engine for schema scripts
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - UserModel, SessionModel, PhotoModel: Core domain entities
  - user_crud, session_crud, photo_crud: CRUD operation singletons

Dependencies: sqlalchemy, photobooth.configs
System role: Database adapter providing persistent storage for users,
sessions and photos with explicit cascade deletes.
"""

from photobooth.boundary.db.base import Base, CreatedAtMixin, IdentityMixin
from photobooth.boundary.db.connection import (
    dispose_engines,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    get_engine,
)
from photobooth.boundary.db.models import PhotoModel, SessionModel, UserModel
from photobooth.boundary.db.CRUD import (
    BaseCRUD,
    PhotoCRUD,
    SessionCRUD,
    UserCRUD,
    photo_crud,
    session_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "IdentityMixin",
    # Connection
    "dispose_engines",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "get_engine",
    # Models
    "UserModel",
    "SessionModel",
    "PhotoModel",
    # CRUD classes
    "BaseCRUD",
    "UserCRUD",
    "SessionCRUD",
    "PhotoCRUD",
    # CRUD singletons
    "user_crud",
    "session_crud",
    "photo_crud",
]
