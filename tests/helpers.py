"""Pixel inspection helpers shared by the test modules."""

import io

import numpy as np
from PIL import Image

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)


def open_png(data: bytes) -> Image.Image:
    """Decode rendered PNG bytes and make sure they really are PNG."""
    img = Image.open(io.BytesIO(data))
    assert img.format == "PNG"
    img.load()
    return img


def as_rgba_array(data: bytes) -> np.ndarray:
    return np.asarray(open_png(data).convert("RGBA"), dtype=np.int16)


def all_close(region: np.ndarray, color: tuple[int, int, int, int], tolerance: int = 1) -> bool:
    return bool(np.all(np.abs(region - np.array(color, dtype=np.int16)) <= tolerance))
