"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, photobooth.configs
System role: Database schema initialization

Usage:
    python -m photobooth.boundary.db.create_tables
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from photobooth.boundary.db.base import Base
from photobooth.boundary.db.connection import get_async_engine, get_engine

# Import all models to register them with Base.metadata
from photobooth.boundary.db.models import PhotoModel, SessionModel, UserModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Raises:
        SQLAlchemyError: If database connection fails or drop fails
    """
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    logger.info("Tables dropped")


async def init_models(engine: AsyncEngine | None = None) -> None:
    """
    Create missing tables through the async engine (application startup).

    Args:
        engine: Engine to use; defaults to the cached application engine
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


if __name__ == "__main__":
    import sys

    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    if "--drop" in sys.argv:
        drop_all_tables()
    create_all_tables()
