"""
Upload storage configuration.

Settings for where uploaded photos are written on disk and the public
URL prefix they are served under.

Dependencies: pydantic_settings
System role: Upload pipeline storage configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UploadSettings(BaseSettings):
    """Settings for local photo upload storage."""

    model_config = SettingsConfigDict(
        env_prefix="UPLOAD_",
        case_sensitive=False,
        extra="ignore",
    )

    root_dir: Path = Field(
        default=Path("uploads"),
        description="Root directory for uploaded files",
    )
    photos_subdir: str = Field(
        default="photos",
        description="Sub-directory of root_dir holding uploaded photos",
    )
    public_prefix: str = Field(
        default="/uploads",
        description="Public URL prefix that maps onto root_dir",
    )
    serve_static: bool = Field(
        default=True,
        description="Mount root_dir as static files under public_prefix",
    )

    @property
    def photos_dir(self) -> Path:
        """Directory uploaded photos are written to."""
        return self.root_dir / self.photos_subdir

    @property
    def photos_url_prefix(self) -> str:
        """Public URL prefix for uploaded photos, without trailing slash."""
        return f"{self.public_prefix.rstrip('/')}/{self.photos_subdir}"
