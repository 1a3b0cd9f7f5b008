"""
Session ORM model.

Represents a photo-booth session owned by exactly one user. Photos are
scoped to sessions and removed together with them.

Dependencies: sqlalchemy, photobooth.boundary.db.base
System role: Session store persistence
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photobooth.boundary.db.base import Base, IdentityMixin, CreatedAtMixin
from photobooth.boundary.db.models.photo_model import PhotoModel

if TYPE_CHECKING:
    from photobooth.boundary.db.models.user_model import UserModel


class SessionModel(Base, IdentityMixin, CreatedAtMixin):
    """
    Session ORM model.

    Each session belongs to one user, fixed at creation. The photo
    collection owns photo lifetime: a photo removed from it is deleted.

    Attributes:
        id: Integer primary key (auto-generated)
        user_id: Foreign key to UserModel (cascade delete)
        user: Owning UserModel
        photos: PhotoModel rows, newest first (cascading delete)
        created_at: Session creation timestamp (UTC)

    Constraints:
        user_id: Foreign key ON DELETE CASCADE to users.id, indexed
    """

    __tablename__ = "sessions"
    __table_args__ = (Index("idx_session_user_id", "user_id"),)

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        doc="User this session belongs to",
    )

    # Relationships
    user: Mapped["UserModel"] = relationship(back_populates="sessions")
    photos: Mapped[list[PhotoModel]] = relationship(
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=[PhotoModel.created_at.desc(), PhotoModel.id.desc()],
    )
