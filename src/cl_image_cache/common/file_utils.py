"""Async filesystem helpers."""

from os import PathLike

import aiofiles.os


async def file_exists(path: str | PathLike[str]) -> bool:
    """Return True if something exists at path.

    Paths the OS cannot represent (embedded NUL, too long) report False.
    """
    try:
        return await aiofiles.os.path.exists(path)
    except (OSError, ValueError):
        return False


async def ensure_directory_exists(path: str | PathLike[str]) -> None:
    """Create a directory and its parents if missing."""
    await aiofiles.os.makedirs(path, exist_ok=True)
