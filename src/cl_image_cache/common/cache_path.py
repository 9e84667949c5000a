"""Deterministic cache path derivation.

The cache key is the file path itself; there is no separate index.
"""

from os import PathLike
from pathlib import Path


def resolve_output_format(requested: str | None, source_extension: str) -> str:
    """Requested format wins, otherwise keep the source extension."""
    return requested or source_extension


def output_extension(format_token: str) -> str:
    fmt = format_token.lower()
    return "jpg" if fmt == "jpeg" else fmt


def format_dimension(value: float) -> str:
    # 50.0 -> "50", 50.5 -> "50.5"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def resolve_cache_path(
    cache_dir: str | PathLike[str],
    filename: str,
    width: float,
    height: float,
    output_format: str,
) -> Path:
    """
    Build `<cache_dir>/<filename>_<width>x<height>.<ext>`.

    Dimensions are embedded as requested, not as produced by the encoder.
    """
    name = (
        f"{filename}_{format_dimension(width)}x{format_dimension(height)}"
        f".{output_extension(output_format)}"
    )
    return Path(cache_dir) / name
