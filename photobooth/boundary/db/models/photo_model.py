"""
Photo ORM model.

Represents a single photo taken during a session, stored as an image URL
(external URL or public path of an uploaded file).

Dependencies: sqlalchemy, photobooth.boundary.db.base
System role: Photo store persistence
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photobooth.boundary.db.base import Base, IdentityMixin, CreatedAtMixin

if TYPE_CHECKING:
    from photobooth.boundary.db.models.session_model import SessionModel


class PhotoModel(Base, IdentityMixin, CreatedAtMixin):
    """
    Photo ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        session_id: Foreign key to SessionModel (cascade delete)
        image_url: Image URL or public upload path (500 char limit)
        created_at: Photo creation timestamp (UTC)

    Relationships:
        session: Parent SessionModel (back_populates=photos)

    Constraints:
        session_id: Foreign key ON DELETE CASCADE to sessions.id, indexed
    """

    __tablename__ = "photos"
    __table_args__ = (Index("idx_photo_session_id", "session_id"),)

    session_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        doc="Session this photo belongs to",
    )

    image_url: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        doc="Image URL or public path of the uploaded file",
    )

    # Relationships
    session: Mapped["SessionModel"] = relationship(back_populates="photos")
