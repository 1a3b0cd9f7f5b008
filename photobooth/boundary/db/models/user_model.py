"""
User ORM model.

Represents a registered photo-booth user. A user owns zero or more
sessions; deleting the user removes them.

Dependencies: sqlalchemy, photobooth.boundary.db.base
System role: Identity store persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photobooth.boundary.db.base import Base, IdentityMixin, CreatedAtMixin
from photobooth.boundary.db.models.session_model import SessionModel


class UserModel(Base, IdentityMixin, CreatedAtMixin):
    """
    User ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        name: Display name (255 char limit)
        sessions: SessionModel rows owned by this user (cascading delete)
        created_at: Creation timestamp (UTC, immutable)

    Relationships:
        sessions: One-to-many with SessionModel (delete-orphan)
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="User display name",
    )

    # Relationships
    sessions: Mapped[list[SessionModel]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=[SessionModel.created_at.desc(), SessionModel.id.desc()],
    )
