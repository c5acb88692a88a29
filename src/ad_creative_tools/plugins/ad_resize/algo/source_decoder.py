"""Decoding of raw uploads into SourceImage values."""

import asyncio
import io

from loguru import logger
from PIL import Image, ImageOps, UnidentifiedImageError

from ....common.errors import InvalidDimensionsError, SourceDecodeError, UnsupportedMediaError
from ....common.schemas import SourceImage
from ....utils.media_types import is_image_mime, parse_data_url


def decode_source_image(data: bytes, mime_type: str | None = None) -> SourceImage:
    """
    Decode raw image bytes into a fully loaded SourceImage.

    Args:
        data: Encoded image (any format Pillow can read)
        mime_type: Declared MIME type of the upload, if known. Anything
            that is not ``image/*`` is rejected before decoding.

    Returns:
        SourceImage with pixel data loaded and EXIF orientation applied

    Raises:
        UnsupportedMediaError: If ``mime_type`` is declared and is not an image
        SourceDecodeError: If the bytes are not a decodable image
        InvalidDimensionsError: If the decoded image has no pixels
    """
    if mime_type is not None and not is_image_mime(mime_type):
        raise UnsupportedMediaError(mime_type)

    if not data:
        raise SourceDecodeError("Source image is empty")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            detected = Image.MIME.get(img.format or "", None)
            decoded = ImageOps.exif_transpose(img)
    except UnidentifiedImageError as exc:
        raise SourceDecodeError(f"Cannot identify image data: {exc}") from exc
    except (OSError, EOFError, SyntaxError, ValueError) as exc:
        raise SourceDecodeError(f"Failed to decode image: {exc}") from exc

    if decoded.width <= 0 or decoded.height <= 0:
        raise InvalidDimensionsError(decoded.width, decoded.height, subject="source")

    logger.debug(f"Decoded {detected or 'image'} source {decoded.width}x{decoded.height}")
    return SourceImage(image=decoded, mime_type=mime_type or detected)


def decode_data_url(data_url: str) -> SourceImage:
    """Decode a ``data:image/...;base64,...`` URL into a SourceImage."""
    try:
        mime_type, payload = parse_data_url(data_url)
    except ValueError as exc:
        raise SourceDecodeError(str(exc)) from exc
    return decode_source_image(payload, mime_type=mime_type)


async def load_source_image(data: bytes, mime_type: str | None = None) -> SourceImage:
    """Decode off the event loop; returns only once the image is fully decoded."""
    return await asyncio.to_thread(decode_source_image, data, mime_type)
