"""Supported image formats and the encode option table."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# Probe order for source discovery. Order is significant: first match wins.
SUPPORTED_FORMATS: tuple[str, ...] = (
    "jpg",
    "jpeg",
    "png",
    "webp",
    "gif",
    "tiff",
    "avif",
)


class OutputFormat(StrEnum):
    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"
    GIF = "gif"
    TIFF = "tiff"
    AVIF = "avif"

    @classmethod
    def from_token(cls, token: str) -> "OutputFormat":
        """Map a format token to an encoder, falling back to JPEG."""
        fmt = token.strip().lower()
        if fmt == "jpg":
            return OutputFormat.JPEG
        try:
            return cls(fmt)
        except ValueError:
            return OutputFormat.JPEG


class EncodeOptions(BaseModel):
    """Pillow save() arguments for one output format."""

    pil_format: str = Field(..., description="Pillow format name passed to Image.save")
    media_type: str = Field(..., description="HTTP content type of the encoded bytes")
    save_kwargs: dict[str, object] = Field(default_factory=dict)
    supports_alpha: bool = True

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


ENCODE_OPTIONS: dict[OutputFormat, EncodeOptions] = {
    OutputFormat.JPEG: EncodeOptions(
        pil_format="JPEG",
        media_type="image/jpeg",
        save_kwargs={"quality": 90},
        supports_alpha=False,
    ),
    OutputFormat.PNG: EncodeOptions(
        pil_format="PNG",
        media_type="image/png",
        save_kwargs={"compress_level": 9},
    ),
    OutputFormat.WEBP: EncodeOptions(
        pil_format="WEBP",
        media_type="image/webp",
        save_kwargs={"quality": 90},
    ),
    OutputFormat.GIF: EncodeOptions(
        pil_format="GIF",
        media_type="image/gif",
    ),
    # TIFF only honours quality together with jpeg compression
    OutputFormat.TIFF: EncodeOptions(
        pil_format="TIFF",
        media_type="image/tiff",
        save_kwargs={"compression": "jpeg", "quality": 90},
        supports_alpha=False,
    ),
    OutputFormat.AVIF: EncodeOptions(
        pil_format="AVIF",
        media_type="image/avif",
        save_kwargs={"quality": 90},
    ),
}


def get_encode_options(format_token: str) -> EncodeOptions:
    """Return encode options for a format token (unknown tokens encode as JPEG)."""
    return ENCODE_OPTIONS[OutputFormat.from_token(format_token)]
