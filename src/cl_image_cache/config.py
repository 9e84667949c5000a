"""Runtime configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ImageCacheSettings(BaseModel):
    """Service settings.

    Layout:
        assets_dir/
            full/     source images (populated out of band)
            thumb/    resized cache entries (owned by this service)
    """

    assets_dir: Path = Field(
        default_factory=lambda: Path.cwd() / "assets",
        description="Root directory holding full/ and thumb/",
    )
    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)
    log_level: str = "INFO"

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def full_dir(self) -> Path:
        return self.assets_dir / "full"

    @property
    def thumb_dir(self) -> Path:
        return self.assets_dir / "thumb"

    @classmethod
    def from_env(cls) -> "ImageCacheSettings":
        values: dict[str, object] = {}

        assets_dir = os.getenv("CL_IMAGE_CACHE_ASSETS_DIR")
        if assets_dir:
            values["assets_dir"] = Path(assets_dir).expanduser().resolve()

        host = os.getenv("HOST")
        if host:
            values["host"] = host

        port = os.getenv("PORT")
        if port:
            values["port"] = port

        log_level = os.getenv("CL_IMAGE_CACHE_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()

        return cls.model_validate(values)
