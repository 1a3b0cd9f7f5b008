"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from photobooth.configs.base import PhotoboothSettings
from photobooth.configs.cors import CorsSettings
from photobooth.configs.database import DatabaseSettings
from photobooth.configs.uploads import UploadSettings


class Settings(PhotoboothSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    uploads: UploadSettings = UploadSettings()
    cors: CorsSettings = CorsSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from photobooth.configs import get_settings
        settings = get_settings()
    """
    return Settings()
