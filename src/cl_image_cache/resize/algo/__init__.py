"""Image resize algorithms."""

from .cover_resize import cover_resize

__all__ = ["cover_resize"]
