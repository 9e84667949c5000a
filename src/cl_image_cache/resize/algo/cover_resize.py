"""Pure cover-fit resize + encode logic (single file)."""

import os
import uuid
from pathlib import Path

from PIL import Image, ImageOps

from ...common.errors import ImageProcessingError
from ...common.formats import EncodeOptions, get_encode_options


def _pixel_size(name: str, value: float) -> int:
    if not float(value).is_integer() or value <= 0:
        raise ImageProcessingError(
            f"Expected positive integer for {name} but received {value} of type number"
        )
    return int(value)


def _target_mode(img: Image.Image, options: EncodeOptions) -> Image.Image:
    """Normalize to RGB, or RGBA when the source has alpha and the target keeps it.

    Covers CMYK, YCbCr, LAB, I;16, F and palette sources, which most
    encoders cannot write directly.
    """
    has_alpha = "A" in img.getbands() or img.has_transparency_data
    if options.supports_alpha and has_alpha:
        return img if img.mode == "RGBA" else img.convert("RGBA")
    return img if img.mode == "RGB" else img.convert("RGB")


def cover_resize(
    *,
    input_path: str | Path,
    output_path: str | Path,
    width: float,
    height: float,
    output_format: str,
) -> str:
    """
    Resize an image to exactly width x height and encode it.

    The source is scaled to cover the target box and the overflow is
    cropped around the center. The image is written to a temporary file
    next to output_path and moved into place with os.replace, so a reader
    either sees no file or a complete one.

    Args:
        input_path: Path to source image
        output_path: Destination path
        width: Target width in pixels (must be integral)
        height: Target height in pixels (must be integral)
        output_format: Format token; unknown tokens encode as JPEG

    Returns:
        Output file path as string

    Raises:
        ImageProcessingError: If the dimensions are not positive integers
        FileNotFoundError: If the source image does not exist
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    size = (_pixel_size("width", width), _pixel_size("height", height))
    options = get_encode_options(output_format)

    temp_path = output_path.with_name(f".{output_path.name}.{uuid.uuid4().hex}.tmp")

    try:
        with Image.open(input_path) as img:
            source = _target_mode(img, options)
            resized = ImageOps.fit(
                source,
                size,
                method=Image.Resampling.LANCZOS,
                centering=(0.5, 0.5),
            )
            resized.save(temp_path, format=options.pil_format, **options.save_kwargs)

        os.replace(temp_path, output_path)
    finally:
        if temp_path.exists():
            temp_path.unlink()

    return str(output_path)
