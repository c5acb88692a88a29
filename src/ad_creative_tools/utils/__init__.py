"""Shared helpers: media type detection and profiling."""

from .media_types import MediaType, is_image_mime, parse_data_url
from .profiling import timed

__all__ = ["MediaType", "is_image_mime", "parse_data_url", "timed"]
