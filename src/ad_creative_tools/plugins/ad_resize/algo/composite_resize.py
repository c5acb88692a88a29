"""Pure cover-fit composite logic (single source, single target size)."""

import io
import math
from dataclasses import dataclass

from loguru import logger
from PIL import Image

from ....common.errors import InvalidDimensionsError
from ....common.schemas import SourceImage
from ....utils.profiling import timed

WHITE = (255, 255, 255, 255)


@dataclass(frozen=True)
class Placement:
    """Where the scaled source lands on the target canvas.

    All values are real numbers in canvas pixels. A negative offset means
    the scaled source overflows the canvas on that axis and only the
    centered slice is visible.
    """

    draw_width: float
    draw_height: float
    offset_x: float
    offset_y: float

    @property
    def cropped(self) -> bool:
        return self.offset_x < 0 or self.offset_y < 0

    @property
    def letterboxed(self) -> bool:
        return self.offset_x > 0 or self.offset_y > 0

    def visible_box(self, target_width: int, target_height: int) -> tuple[int, int, int, int]:
        """Canvas rectangle covered by the source, snapped to whole pixels."""
        left = _round_half_up(max(0.0, self.offset_x))
        top = _round_half_up(max(0.0, self.offset_y))
        right = _round_half_up(min(float(target_width), self.offset_x + self.draw_width))
        bottom = _round_half_up(min(float(target_height), self.offset_y + self.draw_height))
        return left, top, right, bottom


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_placement(
    source_width: int,
    source_height: int,
    target_width: int,
    target_height: int,
) -> Placement:
    """
    Compute the cover-fit placement of a source on a target canvas.

    The source is scaled so that one axis exactly matches the target and
    is centered on the other axis. No rounding happens here.

    Raises:
        InvalidDimensionsError: If any width or height is not positive
    """
    if target_width <= 0 or target_height <= 0:
        raise InvalidDimensionsError(target_width, target_height, subject="target")
    if source_width <= 0 or source_height <= 0:
        raise InvalidDimensionsError(source_width, source_height, subject="source")

    source_aspect = source_width / source_height
    target_aspect = target_width / target_height

    if source_aspect > target_aspect:
        draw_height = float(target_height)
        draw_width = source_width * (target_height / source_height)
        offset_x = (target_width - draw_width) / 2
        offset_y = 0.0
    else:
        draw_width = float(target_width)
        draw_height = source_height * (target_width / source_width)
        offset_x = 0.0
        offset_y = (target_height - draw_height) / 2

    return Placement(
        draw_width=draw_width,
        draw_height=draw_height,
        offset_x=offset_x,
        offset_y=offset_y,
    )


def encode_png(image: Image.Image) -> bytes:
    """Encode an image as PNG without any metadata chunks."""
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@timed
def composite_resize(
    source: SourceImage,
    target_width: int,
    target_height: int,
    *,
    background: tuple[int, int, int, int] = WHITE,
    resample: Image.Resampling = Image.Resampling.BILINEAR,
) -> bytes:
    """
    Render ``source`` onto a ``target_width`` x ``target_height`` canvas.

    Framework-agnostic, single-target operation. The canvas is filled with
    an opaque background, the source is scaled to its cover-fit placement
    and alpha composited on top, then the canvas is PNG encoded. Parts of
    the scaled source outside the canvas are not drawn.

    Args:
        source: Decoded source image (never mutated)
        target_width: Output width in pixels
        target_height: Output height in pixels
        background: Fill color; alpha is forced to fully opaque
        resample: Pillow resampling filter used for scaling

    Returns:
        PNG bytes of exactly ``target_width`` x ``target_height`` pixels

    Raises:
        InvalidDimensionsError: If source or target dimensions are not positive
    """
    placement = compute_placement(source.width, source.height, target_width, target_height)
    logger.debug(
        f"Placing {source.width}x{source.height} source on {target_width}x{target_height}: "
        + f"draw={placement.draw_width:.3f}x{placement.draw_height:.3f} "
        + f"offset=({placement.offset_x:.3f}, {placement.offset_y:.3f})"
    )

    canvas = Image.new("RGBA", (target_width, target_height), (*background[:3], 255))

    left, top, right, bottom = placement.visible_box(target_width, target_height)
    if right > left and bottom > top:
        # Map the snapped canvas edges back into source coordinates
        scale_x = source.width / placement.draw_width
        scale_y = source.height / placement.draw_height
        box = (
            max(0.0, (left - placement.offset_x) * scale_x),
            max(0.0, (top - placement.offset_y) * scale_y),
            min(float(source.width), (right - placement.offset_x) * scale_x),
            min(float(source.height), (bottom - placement.offset_y) * scale_y),
        )

        layer = source.image if source.image.mode == "RGBA" else source.image.convert("RGBA")
        scaled = layer.resize((right - left, bottom - top), resample=resample, box=box)
        canvas.alpha_composite(scaled, dest=(left, top))

    return encode_png(canvas)
