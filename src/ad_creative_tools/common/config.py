"""Runtime configuration for the ad resize pipeline."""

import json
from os import PathLike
from pathlib import Path
from typing import ClassVar, Literal

from PIL import Image, ImageColor
from pydantic import BaseModel, ConfigDict, Field, field_validator

ResampleName = Literal["nearest", "bilinear", "bicubic", "lanczos"]

_RESAMPLING: dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


class AdResizeConfig(BaseModel):
    """Tunables for rendering and surfacing ad creatives.

    Attributes:
        background: Letterbox fill color, any Pillow color string.
            Always rendered fully opaque.
        resample: Resampling filter used when scaling the source.
        delay_seconds: Minimum latency applied by the orchestration task
            before results are surfaced. The core never sleeps.
        catalog_path: Optional JSON file replacing the built-in formats.
    """

    background: str = Field(default="#FFFFFF", description="Letterbox fill color")
    resample: ResampleName = Field(default="bilinear", description="Resampling filter")
    delay_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="Artificial delay before results are surfaced",
    )
    catalog_path: str | None = Field(default=None, description="Path to a JSON format catalog")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @field_validator("background")
    @classmethod
    def validate_background(cls, v: str) -> str:
        try:
            _ = ImageColor.getrgb(v)
        except ValueError as exc:
            raise ValueError(f"Unrecognised background color: {v}") from exc
        return v

    @property
    def background_rgba(self) -> tuple[int, int, int, int]:
        rgb = ImageColor.getrgb(self.background)
        return (rgb[0], rgb[1], rgb[2], 255)

    @property
    def resampling(self) -> Image.Resampling:
        return _RESAMPLING[self.resample]

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "AdResizeConfig":
        with open(Path(path), encoding="utf-8") as f:
            return cls.model_validate(json.load(f))
