"""Test configuration and fixtures for ad_creative_tools.

This module provides:
- Fabricated SourceImage values (no decoder involved)
- Encoded image bytes for decoder and task tests
- A temporary job storage
"""

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from ad_creative_tools.common.file_storage_impl import LocalFileStorage
from ad_creative_tools.common.format_catalog import FormatCatalog
from ad_creative_tools.common.schemas import AdFormat, SourceImage
from tests.helpers import BLUE, GREEN, RED

# ============================================================================
# Source fixtures
# ============================================================================


@pytest.fixture
def make_source() -> Callable[..., SourceImage]:
    """Factory for solid-color SourceImage values of any size."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, ...] = RED,
        mode: str = "RGBA",
    ) -> SourceImage:
        return SourceImage(image=Image.new(mode, (width, height), color=color))

    return _make


@pytest.fixture
def striped_source() -> SourceImage:
    """300x100 source made of three 100px vertical bands: red, green, blue."""
    img = Image.new("RGBA", (300, 100), color=RED)
    draw = ImageDraw.Draw(img)
    draw.rectangle([100, 0, 199, 99], fill=GREEN)
    draw.rectangle([200, 0, 299, 99], fill=BLUE)
    return SourceImage(image=img)


@pytest.fixture
def synthetic_png_bytes() -> bytes:
    """Encoded 800x600 PNG with a grid and a circle."""
    img = Image.new("RGB", (800, 600), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, 800, 50):
        draw.line([(i, 0), (i, 600)], fill=(255, 255, 255), width=2)
    for i in range(0, 600, 50):
        draw.line([(0, i), (800, i)], fill=(255, 255, 255), width=2)

    draw.ellipse([300, 200, 500, 400], fill=(200, 100, 100))

    buffer = io.BytesIO()
    img.save(buffer, "PNG")
    return buffer.getvalue()


# ============================================================================
# Catalog / storage fixtures
# ============================================================================


@pytest.fixture
def small_catalog() -> FormatCatalog:
    """Tiny formats keep rendering fast in tests that don't need real sizes."""
    return FormatCatalog(
        [
            AdFormat(id="square", name="Square", width=40, height=40),
            AdFormat(id="tall", name="Tall", width=18, height=32),
            AdFormat(id="wide", name="Wide", width=60, height=31),
        ]
    )


@pytest.fixture
def storage(tmp_path: Path) -> LocalFileStorage:
    return LocalFileStorage(tmp_path / "storage")
