"""cl_image_cache - resize stored images on request and cache the results on disk."""

__version__ = "2.0.0"

from .app import configure_logging, create_app
from .common.schemas import ProcessingResult, ResizeParams, ResizeRequest, SourceImage
from .config import ImageCacheSettings
from .resize.engine import ResizeEngine

__all__ = [
    "ImageCacheSettings",
    "ProcessingResult",
    "ResizeEngine",
    "ResizeParams",
    "ResizeRequest",
    "SourceImage",
    "configure_logging",
    "create_app",
    "__version__",
]
