"""
CORS configuration settings.

Dependencies: pydantic_settings
System role: Cross-origin settings for the browser frontend
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CorsSettings(BaseSettings):
    """Cross-Origin Resource Sharing settings."""

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        case_sensitive=False,
        extra="ignore",
    )

    allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed origins (JSON list in env, e.g. '[\"http://localhost:3000\"]')",
    )
    allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        description="Allowed HTTP methods",
    )
    allow_headers: list[str] = Field(
        default_factory=lambda: [
            "Content-Type",
            "Authorization",
            "X-Requested-With",
            "Accept",
            "Origin",
            "X-Correlation-ID",
        ],
        description="Allowed request headers",
    )
    expose_headers: list[str] = Field(
        default_factory=lambda: ["Content-Disposition", "X-Correlation-ID"],
        description="Headers exposed to the browser",
    )
    max_age: int = Field(default=3600, description="Preflight cache lifetime in seconds")
