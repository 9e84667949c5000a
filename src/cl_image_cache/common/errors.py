"""Error taxonomy for the resize pipeline."""

from .formats import SUPPORTED_FORMATS


class ImageCacheError(Exception):
    """Base class for resize pipeline errors."""


class ResizeValidationError(ImageCacheError):
    """Missing or malformed resize parameters."""


class SourceImageNotFoundError(ImageCacheError):
    def __init__(self, filename: str):
        self.filename: str = filename
        super().__init__(
            f"Image '{filename}' not found in full folder. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )


class ImageProcessingError(ImageCacheError):
    """Decode, resize or encode failure."""
