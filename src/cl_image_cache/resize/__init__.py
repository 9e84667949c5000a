"""Image resize-and-cache pipeline."""

from .engine import ResizeEngine
from .routes import create_router

__all__ = ["ResizeEngine", "create_router"]
