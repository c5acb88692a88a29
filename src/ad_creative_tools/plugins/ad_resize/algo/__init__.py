"""Ad resize algorithms."""

from .batch_generate import BatchGenerator, generate
from .composite_resize import Placement, composite_resize, compute_placement, encode_png
from .source_decoder import decode_data_url, decode_source_image, load_source_image

__all__ = [
    "BatchGenerator",
    "Placement",
    "composite_resize",
    "compute_placement",
    "decode_data_url",
    "decode_source_image",
    "encode_png",
    "generate",
    "load_source_image",
]
