"""
Test suite for user, session and photo CRUD classes.

Covers per-parent listing, eager loading of session details, name lookup
and the explicit user -> sessions -> photos cascade deletes.

System role: Verification of relationship persistence against SQLite
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from photobooth.boundary.db.CRUD import photo_crud, session_crud, user_crud


async def _seed(db: AsyncSession) -> dict:
    """Two users; the first has two sessions holding three photos."""
    ava = await user_crud.create(db, name="Ava")
    ben = await user_crud.create(db, name="Ben")
    s1 = await session_crud.create(db, user_id=ava.id)
    s2 = await session_crud.create(db, user_id=ava.id)
    s3 = await session_crud.create(db, user_id=ben.id)
    p1 = await photo_crud.create(db, session_id=s1.id, image_url="https://x/1.jpg")
    p2 = await photo_crud.create(db, session_id=s1.id, image_url="https://x/2.jpg")
    p3 = await photo_crud.create(db, session_id=s2.id, image_url="https://x/3.jpg")
    p4 = await photo_crud.create(db, session_id=s3.id, image_url="https://x/4.jpg")
    await db.commit()
    return {
        "users": (ava, ben),
        "sessions": (s1, s2, s3),
        "photos": (p1, p2, p3, p4),
    }


class TestPhotoCRUD:
    """Photo queries scoped by session."""

    @pytest.mark.asyncio
    async def test_get_by_session_id_returns_only_that_session_newest_first(
        self, test_async_db: AsyncSession
    ) -> None:
        # Arrange
        data = await _seed(test_async_db)
        s1 = data["sessions"][0]
        p1, p2 = data["photos"][:2]

        # Act
        photos = await photo_crud.get_by_session_id(test_async_db, s1.id)

        # Assert
        assert [p.id for p in photos] == [p2.id, p1.id]

    @pytest.mark.asyncio
    async def test_delete_by_session_ids_with_empty_list_is_noop(
        self, test_async_db: AsyncSession
    ) -> None:
        await _seed(test_async_db)

        assert await photo_crud.delete_by_session_ids(test_async_db, []) == 0
        assert len(await photo_crud.get_all(test_async_db)) == 4


class TestSessionCRUD:
    """Session detail loading and session cascade."""

    @pytest.mark.asyncio
    async def test_get_with_details_loads_user_and_photos(
        self, test_async_db: AsyncSession
    ) -> None:
        # Arrange
        data = await _seed(test_async_db)
        s1 = data["sessions"][0]

        # Act
        loaded = await session_crud.get_with_details(test_async_db, s1.id)

        # Assert
        assert loaded is not None
        assert loaded.user.name == "Ava"
        assert [p.image_url for p in loaded.photos] == [
            "https://x/2.jpg",
            "https://x/1.jpg",
        ]

    @pytest.mark.asyncio
    async def test_get_with_details_sees_photos_added_after_first_load(
        self, test_async_db: AsyncSession
    ) -> None:
        # Arrange
        data = await _seed(test_async_db)
        s2 = data["sessions"][1]
        await session_crud.get_with_details(test_async_db, s2.id)
        await photo_crud.create(test_async_db, session_id=s2.id, image_url="https://x/new.jpg")
        await test_async_db.commit()

        # Act
        loaded = await session_crud.get_with_details(test_async_db, s2.id)

        # Assert
        assert [p.image_url for p in loaded.photos][0] == "https://x/new.jpg"
        assert len(loaded.photos) == 2

    @pytest.mark.asyncio
    async def test_get_by_user_id_newest_first(self, test_async_db: AsyncSession) -> None:
        data = await _seed(test_async_db)
        ava = data["users"][0]
        s1, s2, _ = data["sessions"]

        sessions = await session_crud.get_by_user_id(test_async_db, ava.id)

        assert [s.id for s in sessions] == [s2.id, s1.id]

    @pytest.mark.asyncio
    async def test_delete_with_photos_removes_session_and_its_photos_only(
        self, test_async_db: AsyncSession
    ) -> None:
        # Arrange
        data = await _seed(test_async_db)
        s1 = data["sessions"][0]

        # Act
        counts = await session_crud.delete_with_photos(test_async_db, s1.id)
        await test_async_db.commit()

        # Assert
        assert counts == {"sessions": 1, "photos": 2}
        assert await session_crud.get_by_id(test_async_db, s1.id) is None
        remaining = await photo_crud.get_all(test_async_db)
        assert sorted(p.image_url for p in remaining) == [
            "https://x/3.jpg",
            "https://x/4.jpg",
        ]


class TestUserCRUD:
    """Name lookup and the full user cascade."""

    @pytest.mark.asyncio
    async def test_exists_by_name(self, test_async_db: AsyncSession) -> None:
        await _seed(test_async_db)

        assert await user_crud.exists_by_name(test_async_db, "Ava") is True
        assert await user_crud.exists_by_name(test_async_db, "ava") is False

    @pytest.mark.asyncio
    async def test_delete_with_sessions_removes_n_plus_m_plus_one_rows(
        self, test_async_db: AsyncSession
    ) -> None:
        # Arrange
        data = await _seed(test_async_db)
        ava, ben = data["users"]
        s1, s2, s3 = data["sessions"]
        p1, p2, p3, p4 = data["photos"]

        # Act
        counts = await user_crud.delete_with_sessions(test_async_db, ava.id)
        await test_async_db.commit()

        # Assert
        assert counts == {"users": 1, "sessions": 2, "photos": 3}
        assert sum(counts.values()) == 2 + 3 + 1
        assert await user_crud.get_by_id(test_async_db, ava.id) is None
        for sid in (s1.id, s2.id):
            assert await session_crud.get_by_id(test_async_db, sid) is None
        for pid in (p1.id, p2.id, p3.id):
            assert await photo_crud.get_by_id(test_async_db, pid) is None
        # Other user's graph is untouched
        assert await user_crud.get_by_id(test_async_db, ben.id) is not None
        assert await session_crud.get_by_id(test_async_db, s3.id) is not None
        assert await photo_crud.get_by_id(test_async_db, p4.id) is not None

    @pytest.mark.asyncio
    async def test_delete_with_sessions_for_user_without_sessions(
        self, test_async_db: AsyncSession
    ) -> None:
        user = await user_crud.create(test_async_db, name="Solo")

        counts = await user_crud.delete_with_sessions(test_async_db, user.id)

        assert counts == {"users": 1, "sessions": 0, "photos": 0}
