"""Test configuration and fixtures for cl_image_cache.

This module provides:
- Pytest configuration (markers)
- Function-scoped fixtures (temp assets tree, settings, engine)
- Synthetic source images drawn with PIL
- Integration fixtures (API client)
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from cl_image_cache import ImageCacheSettings, ResizeEngine, create_app
from cl_image_cache.common.formats import get_encode_options

MakeImage = Callable[..., Path]


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: full HTTP round-trip tests (API -> engine -> disk)",
    )


# ============================================================================
# Assets / Settings Fixtures
# ============================================================================


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Provide a clean assets/ tree with an empty full/ directory."""
    assets = tmp_path / "assets"
    (assets / "full").mkdir(parents=True)
    return assets


@pytest.fixture
def settings(assets_dir: Path) -> ImageCacheSettings:
    return ImageCacheSettings(assets_dir=assets_dir)


@pytest.fixture
def engine(settings: ImageCacheSettings) -> ResizeEngine:
    return ResizeEngine(settings)


# ============================================================================
# Synthetic Image Fixtures
# ============================================================================


def draw_synthetic_image(size: tuple[int, int] = (800, 600), mode: str = "RGB") -> Image.Image:
    """Grid pattern with a circle in the middle."""
    width, height = size
    img = Image.new("RGB", size, color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width * 3 // 8, height // 3, width * 5 // 8, height * 2 // 3],
        fill=(200, 100, 100),
    )

    if mode == "RGBA":
        img.putalpha(200)
    elif mode == "P":
        img = img.convert("P", palette=Image.Palette.ADAPTIVE)

    return img


@pytest.fixture
def synthetic_source(tmp_path: Path) -> Path:
    """Synthetic 800x600 JPEG outside the assets tree."""
    output_path = tmp_path / "synthetic.jpg"
    draw_synthetic_image().save(output_path, "JPEG", quality=85)
    return output_path


@pytest.fixture
def make_image(settings: ImageCacheSettings) -> MakeImage:
    """Factory writing a synthetic image into the source (full/) directory."""

    def _make(
        name: str,
        ext: str = "jpg",
        size: tuple[int, int] = (800, 600),
        mode: str = "RGB",
    ) -> Path:
        path = settings.full_dir / f"{name}.{ext}"
        img = draw_synthetic_image(size, mode)
        img.save(path, format=get_encode_options(ext).pil_format)
        return path

    return _make


@pytest.fixture
def sample_jpeg(make_image: MakeImage) -> Path:
    """full/test.jpg, 800x600."""
    return make_image("test")


# ============================================================================
# Integration Fixtures
# ============================================================================


@pytest.fixture
def api_client(settings: ImageCacheSettings) -> TestClient:
    """Provide FastAPI TestClient for route testing."""
    return TestClient(create_app(settings))
