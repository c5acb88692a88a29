"""Core data models: ad formats, decoded sources and rendered assets."""

import base64
from dataclasses import dataclass, field
from typing import ClassVar

from PIL import Image
from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidDimensionsError

# ─────────────────────────────────────────────────────────────
# Ad format
# ─────────────────────────────────────────────────────────────


class AdFormat(BaseModel):
    """A named target pixel size a source image is rendered into."""

    id: str = Field(..., min_length=1, description="Unique format identifier")
    name: str = Field(..., description="Human readable name")
    width: int = Field(..., gt=0, description="Target width in pixels")
    height: int = Field(..., gt=0, description="Target height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def label(self) -> str:
        return f"{self.name} ({self.width}×{self.height})"


# ─────────────────────────────────────────────────────────────
# Decoded source
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SourceImage:
    """A fully decoded raster with known dimensions.

    The wrapped image is only ever read. Rendering works on copies, so the
    same SourceImage can feed any number of formats.
    """

    image: Image.Image = field(repr=False)
    mime_type: str | None = None

    def __post_init__(self) -> None:
        width, height = self.image.size
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(width, height, subject="source")

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


# ─────────────────────────────────────────────────────────────
# Rendered asset
# ─────────────────────────────────────────────────────────────


class ResizedAsset(BaseModel):
    """One encoded raster produced for one ad format."""

    format: AdFormat
    encoded_image: bytes = Field(..., repr=False, description="PNG encoded raster")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    mime_type: ClassVar[str] = "image/png"

    @property
    def filename(self) -> str:
        """Suggested download name, e.g. ``ad-ig-story.png``."""
        return f"ad-{self.format.id}.png"

    def to_data_url(self) -> str:
        payload = base64.b64encode(self.encoded_image).decode("ascii")
        return f"data:{self.mime_type};base64,{payload}"
