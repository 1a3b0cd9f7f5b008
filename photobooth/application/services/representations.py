"""
Entity to representation mapping.

Services hand plain dicts across the API boundary; ORM instances never
leave the service layer.

Dependencies: photobooth.boundary.db.models
System role: Shared response projection for user, session and photo services
"""

from typing import Any, Iterable

from photobooth.boundary.db.models import PhotoModel, SessionModel, UserModel


def user_to_dict(user: UserModel) -> dict[str, Any]:
    """Project a user row to its representation."""
    return {
        "id": user.id,
        "name": user.name,
        "created_at": user.created_at,
    }


def photo_to_dict(photo: PhotoModel) -> dict[str, Any]:
    """Project a photo row to its representation."""
    return {
        "id": photo.id,
        "session_id": photo.session_id,
        "image_url": photo.image_url,
        "created_at": photo.created_at,
    }


def session_to_dict(
    session: SessionModel,
    photos: Iterable[PhotoModel] = (),
) -> dict[str, Any]:
    """
    Project a session row to its representation.

    Args:
        session: Session row
        photos: Photos to embed; pass the eagerly loaded collection for the
            detailed view. Never touches session.photos itself, so no lazy
            load is triggered.

    Returns:
        dict: id, user_id, created_at and the embedded photo list
    """
    return {
        "id": session.id,
        "user_id": session.user_id,
        "created_at": session.created_at,
        "photos": [photo_to_dict(p) for p in photos],
    }
