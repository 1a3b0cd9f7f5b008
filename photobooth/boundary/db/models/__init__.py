"""
Database models package.

Exports:
  - UserModel: User ORM model
  - SessionModel: Session ORM model
  - PhotoModel: Photo ORM model

Dependencies: sqlalchemy, photobooth.boundary.db.base
System role: Database model definitions for domain entities
"""

from photobooth.boundary.db.models.photo_model import PhotoModel
from photobooth.boundary.db.models.session_model import SessionModel
from photobooth.boundary.db.models.user_model import UserModel

__all__ = [
    "UserModel",
    "SessionModel",
    "PhotoModel",
]
