"""
Shared settings base for the photobooth service.

Every settings class reads the same .env file and ignores unknown keys.
The process-wide fields live here: deployment environment and log level.

Dependencies: pydantic, pydantic_settings
System role: Root of the configuration classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhotoboothSettings(BaseSettings):
    """Settings common to the API process and its helper scripts."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name reported at startup (development, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the API process",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level
