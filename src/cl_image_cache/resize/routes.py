"""Image resize route factory."""

from typing import Annotated

import aiofiles
from fastapi import APIRouter, Query, Response
from fastapi.responses import JSONResponse
from loguru import logger

from ..common.schemas import ResizeParams
from .engine import ResizeEngine

NOT_FOUND_MARKER = "not found"


def _error(status_code: int, error: str, message: str | None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def create_router(engine: ResizeEngine) -> APIRouter:
    """Create the /api/images router bound to a ResizeEngine.

    Args:
        engine: ResizeEngine used to serve requests

    Returns:
        Configured APIRouter with the image resize endpoint
    """
    router = APIRouter()

    @router.get("/api/images")
    async def get_image(
        filename: Annotated[str | None, Query(description="Image name without extension")] = None,
        width: Annotated[str | None, Query(description="Width in pixels")] = None,
        height: Annotated[str | None, Query(description="Height in pixels")] = None,
        format: Annotated[
            str | None,
            Query(description="Output format: jpg, png, webp, gif, tiff, avif"),
        ] = None,
    ) -> Response:
        """Resize a stored image and return it.

        Examples:
            /api/images?filename=argentina&width=100&height=100
            /api/images?filename=photo&width=200&height=200&format=webp
        """
        try:
            if not filename:
                return _error(
                    400,
                    "Missing required parameter: filename",
                    "Please provide a filename parameter",
                )

            if not width or not height:
                return _error(
                    400,
                    "Missing required parameters",
                    "Both width and height parameters are required",
                )

            result = await engine.resize(
                ResizeParams(
                    filename=filename,
                    width=width,
                    height=height,
                    format=format or None,
                )
            )

            if not result.success:
                if result.error and NOT_FOUND_MARKER in result.error:
                    return _error(404, "Image not found", result.error)
                return _error(400, "Image processing failed", result.error)

            assert result.output_path is not None

            try:
                async with aiofiles.open(result.output_path, "rb") as f:
                    content = await f.read()
            except OSError as e:
                logger.error(f"Error sending file {result.output_path}: {e}")
                return _error(
                    500,
                    "Failed to send image",
                    "An error occurred while sending the resized image",
                )

            return Response(content=content, media_type=result.media_type)

        except Exception as e:
            logger.exception(f"Unexpected error in /api/images: {e}")
            return _error(
                500,
                "Internal server error",
                str(e) or "An unexpected error occurred",
            )

    # Mark function as used (accessed via FastAPI decorator)
    _ = get_image

    return router
