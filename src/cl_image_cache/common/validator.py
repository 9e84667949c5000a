"""Resize parameter validation.

Checks run in a fixed order and the first failing check decides the
message, so error reporting is deterministic.
"""

import math
import re

from .errors import ResizeValidationError
from .schemas import ResizeParams, ResizeRequest, ValidationResult

FILENAME_REQUIRED = "Filename is required"
DIMENSIONS_REQUIRED = "Both width and height parameters are required"
DIMENSIONS_NOT_NUMBERS = "Width and height must be valid numbers"
DIMENSIONS_NOT_POSITIVE = "Width and height must be positive numbers"

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def coerce_dimension(value: object) -> float | None:
    """Coerce a width/height value to a finite float, or None if impossible.

    Strings must be plain decimal or exponent notation after stripping;
    a blank string counts as 0.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _DECIMAL.fullmatch(text) is None:
            return None
        number = float(text)
    else:
        return None

    return number if math.isfinite(number) else None


def validate_resize_params(
    filename: str | None,
    width: object | None,
    height: object | None,
) -> ValidationResult:
    if filename is None or not filename.strip():
        return ValidationResult(valid=False, error=FILENAME_REQUIRED)

    if width is None or height is None:
        return ValidationResult(valid=False, error=DIMENSIONS_REQUIRED)

    width_num = coerce_dimension(width)
    height_num = coerce_dimension(height)
    if width_num is None or height_num is None:
        return ValidationResult(valid=False, error=DIMENSIONS_NOT_NUMBERS)

    if width_num <= 0 or height_num <= 0:
        return ValidationResult(valid=False, error=DIMENSIONS_NOT_POSITIVE)

    return ValidationResult(valid=True)


def parse_resize_request(params: ResizeParams) -> ResizeRequest:
    """Turn raw parameters into a typed ResizeRequest.

    Raises:
        ResizeValidationError: If any validation check fails
    """
    result = validate_resize_params(params.filename, params.width, params.height)
    if not result.valid:
        raise ResizeValidationError(result.error)

    # validated above; both coerce to positive finite floats
    width = coerce_dimension(params.width)
    height = coerce_dimension(params.height)
    assert params.filename is not None and width is not None and height is not None

    fmt = params.format.strip().lower() if params.format else None

    return ResizeRequest(
        filename=params.filename,
        width=width,
        height=height,
        format=fmt or None,
    )
