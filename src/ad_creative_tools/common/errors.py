"""Exception hierarchy for ad creative generation."""

from typing import Literal
from typing_extensions import override


class AdCreativeError(Exception):
    """Base class for every error raised by ad_creative_tools."""

    def __init__(self, message: str = "An unknown ad creative error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class InvalidDimensionsError(AdCreativeError, ValueError):
    """Source or target width/height is not a positive number."""

    def __init__(
        self,
        width: float,
        height: float,
        subject: Literal["source", "target"] = "target",
    ):
        self.width: float = width
        self.height: float = height
        self.subject: str = subject
        super().__init__(
            f"Invalid {subject} dimensions {width}x{height}: width and height must be positive"
        )


class MissingSourceError(AdCreativeError):
    def __init__(self, message: str = "No source image has been decoded"):
        super().__init__(message)


class NoFormatsSelectedError(AdCreativeError):
    def __init__(self, message: str = "At least one ad format must be selected"):
        super().__init__(message)


class FormatNotFoundError(AdCreativeError, KeyError):
    """Catalog lookup for an unknown format id."""

    def __init__(self, format_id: str):
        self.format_id: str = format_id
        super().__init__(f"Unknown ad format id: '{format_id}'")


class UnsupportedMediaError(AdCreativeError):
    def __init__(self, mime_type: str):
        self.mime_type: str = mime_type
        super().__init__(f"Unsupported media type: {mime_type}. Only images are supported.")


class SourceDecodeError(AdCreativeError):
    """Raw bytes could not be decoded into a raster image."""
