"""Source image discovery across supported extensions."""

from os import PathLike
from pathlib import Path

from .file_utils import file_exists
from .formats import SUPPORTED_FORMATS
from .schemas import SourceImage


async def locate_source_image(
    base_dir: str | PathLike[str],
    filename: str,
) -> SourceImage | None:
    """
    Find `<base_dir>/<filename>.<ext>` for the first supported extension.

    Extensions are probed in SUPPORTED_FORMATS order, so when several
    candidates coexist the earliest one in that order wins. Only existence
    is checked; file content is not opened here.

    Args:
        base_dir: Directory holding the source images
        filename: Bare image name without extension

    Returns:
        SourceImage for the first match, or None if no candidate exists
    """
    base = Path(base_dir)

    for ext in SUPPORTED_FORMATS:
        candidate = base / f"{filename}.{ext}"
        if await file_exists(candidate):
            return SourceImage(path=candidate, extension=ext)

    return None
