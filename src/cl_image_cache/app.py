"""FastAPI application factory and server entry point."""

import sys
from typing import Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .common.formats import SUPPORTED_FORMATS
from .config import ImageCacheSettings
from .resize.engine import ResizeEngine
from .resize.routes import create_router

API_INFO: dict[str, object] = {
    "message": "Image Processing API",
    "version": __version__,
    "description": (
        "Resize images with support for multiple formats: " + ", ".join(SUPPORTED_FORMATS)
    ),
    "endpoints": {
        "images": "/api/images?filename=<name>&width=<pixels>&height=<pixels>&format=<format>",
    },
    "parameters": {
        "filename": "Image name without extension (required)",
        "width": "Width in pixels (required)",
        "height": "Height in pixels (required)",
        "format": "Output format: jpg, png, webp, gif, tiff, avif (optional)",
    },
    "examples": [
        "/api/images?filename=argentina&width=100&height=100",
        "/api/images?filename=photo&width=200&height=200&format=webp",
        "/api/images?filename=logo&width=300&height=300&format=png",
    ],
    "supportedFormats": list(SUPPORTED_FORMATS),
}


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a stderr sink at the given level."""
    logger.remove()
    _ = logger.add(sys.stderr, level=level)


def create_app(settings: ImageCacheSettings | None = None) -> FastAPI:
    """Build the FastAPI app.

    Args:
        settings: Service settings; read from the environment when omitted

    Returns:
        FastAPI app serving / and /api/images
    """
    settings = settings or ImageCacheSettings.from_env()

    app = FastAPI(title="Image Processing API", version=__version__)
    app.state.settings = settings

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
        # unmatched method on a known path is reported like an unknown route
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Not Found",
                    "message": f"Route {request.url.path} not found",
                },
            )
        return await http_exception_handler(request, exc)

    @app.get("/")
    async def api_info() -> JSONResponse:
        return JSONResponse(content=API_INFO)

    app.include_router(create_router(ResizeEngine(settings)))

    _ = (log_requests, not_found_handler, api_info)

    return app


def main() -> None:
    settings = ImageCacheSettings.from_env()
    configure_logging(settings.log_level)

    logger.info(f"Server is running on http://localhost:{settings.port}")
    logger.info(f"Image resize endpoint: http://localhost:{settings.port}/api/images")

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level="warning")
