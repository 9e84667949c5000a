"""Resize engine - orchestrates validation, lookup, caching and encoding."""

import asyncio

from loguru import logger

from ..common.cache_path import resolve_cache_path, resolve_output_format
from ..common.errors import (
    ImageCacheError,
    ImageProcessingError,
    ResizeValidationError,
    SourceImageNotFoundError,
)
from ..common.file_utils import ensure_directory_exists, file_exists
from ..common.formats import get_encode_options
from ..common.schemas import ProcessingResult, ResizeParams
from ..common.source_locator import locate_source_image
from ..common.validator import parse_resize_request
from ..config import ImageCacheSettings
from .algo.cover_resize import cover_resize

UNKNOWN_ERROR = "An unknown error occurred during image processing"


class ResizeEngine:
    """
    Stateless request handler for resize-and-cache.

    - Every failure becomes a ProcessingResult with success=False
    - The cache file path is the cache key; its existence is a hit
    - Concurrent misses for the same key may both encode; the last
      atomic replace wins
    """

    def __init__(self, settings: ImageCacheSettings):
        self.settings: ImageCacheSettings = settings

    async def resize(self, params: ResizeParams) -> ProcessingResult:
        try:
            request = parse_resize_request(params)

            source = await locate_source_image(self.settings.full_dir, request.filename)
            if source is None:
                raise SourceImageNotFoundError(request.filename)

            output_format = resolve_output_format(request.format, source.extension)
            media_type = get_encode_options(output_format).media_type
            thumb_path = resolve_cache_path(
                self.settings.thumb_dir,
                request.filename,
                request.width,
                request.height,
                output_format,
            )

            await ensure_directory_exists(self.settings.thumb_dir)

            if await file_exists(thumb_path):
                logger.debug(f"Cache hit: {thumb_path}")
                return ProcessingResult(
                    success=True,
                    output_path=thumb_path,
                    cached=True,
                    media_type=media_type,
                )

            logger.debug(f"Cache miss: {thumb_path}")
            try:
                _ = await asyncio.to_thread(
                    cover_resize,
                    input_path=source.path,
                    output_path=thumb_path,
                    width=request.width,
                    height=request.height,
                    output_format=output_format,
                )
            except ImageProcessingError:
                raise
            except Exception as exc:
                raise ImageProcessingError(str(exc) or UNKNOWN_ERROR) from exc

            logger.info(f"Encoded {source.path.name} -> {thumb_path.name} ({output_format})")
            return ProcessingResult(
                success=True,
                output_path=thumb_path,
                cached=False,
                media_type=media_type,
            )

        except (ResizeValidationError, SourceImageNotFoundError) as exc:
            logger.warning(f"Resize rejected: {exc}")
            return ProcessingResult(success=False, error=str(exc) or UNKNOWN_ERROR)

        except ImageCacheError as exc:
            logger.error(f"Resize failed: {exc}")
            return ProcessingResult(success=False, error=str(exc) or UNKNOWN_ERROR)

        except Exception as exc:
            logger.exception(f"Unexpected resize failure: {exc}")
            return ProcessingResult(success=False, error=str(exc) or UNKNOWN_ERROR)
