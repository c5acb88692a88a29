import base64
import binascii
import re
from enum import StrEnum
from urllib.parse import unquote_to_bytes


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_mime(cls, file_type: str) -> "MediaType":
        if file_type.startswith("image"):
            return MediaType.IMAGE
        elif file_type.startswith("video"):
            return MediaType.VIDEO
        elif file_type.startswith("audio"):
            return MediaType.AUDIO
        elif file_type.startswith("text"):
            return MediaType.TEXT
        else:
            return MediaType.FILE


def is_image_mime(file_type: str | None) -> bool:
    return file_type is not None and MediaType.from_mime(file_type.lower()) == MediaType.IMAGE


_DATA_URL_PATTERN = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(?:;[\w.+-]+=[^;,]*)*)(?P<base64>;base64)?,(?P<payload>.*)$",
    re.DOTALL,
)


def parse_data_url(data_url: str) -> tuple[str, bytes]:
    """Split a ``data:`` URL into its MIME type and decoded payload.

    Returns:
        (mime_type, payload). The MIME type defaults to
        ``text/plain`` when the URL omits it.

    Raises:
        ValueError: If the string is not a well formed data URL
    """
    match = _DATA_URL_PATTERN.match(data_url.strip())
    if match is None:
        raise ValueError("Not a data URL")

    mime_type = match.group("mime") or "text/plain"
    payload = match.group("payload")

    if match.group("base64"):
        try:
            return mime_type, base64.b64decode(payload, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Invalid base64 payload in data URL: {exc}") from exc

    return mime_type, unquote_to_bytes(payload)
