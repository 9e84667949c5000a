"""Pydantic schemas for resize requests and results."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Request models
# ─────────────────────────────────────────────────────────────


class ResizeParams(BaseModel):
    """Raw resize parameters as received at the boundary.

    Values are kept untyped (query strings, numbers or None); they only
    become a ResizeRequest after validation.
    """

    filename: str | None = None
    width: object | None = None
    height: object | None = None
    format: str | None = None


class ResizeRequest(BaseModel):
    """Validated resize request."""

    filename: str = Field(..., min_length=1, description="Logical image name (no extension)")
    width: float = Field(..., gt=0, description="Target width in pixels")
    height: float = Field(..., gt=0, description="Target height in pixels")
    format: str | None = Field(
        default=None,
        description="Output format token; None keeps the source extension",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ValidationResult(BaseModel):
    valid: bool
    error: str | None = None


# ─────────────────────────────────────────────────────────────
# Pipeline values
# ─────────────────────────────────────────────────────────────


class SourceImage(BaseModel):
    """A located source file and the extension it was found under."""

    path: Path
    extension: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class ProcessingResult(BaseModel):
    """Outcome of a single resize request."""

    success: bool
    output_path: Path | None = None
    cached: bool | None = None
    error: str | None = None
    media_type: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
