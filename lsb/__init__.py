"""
redlsb - hide text in the red channel of an image, one bit per pixel
"""

from .config import CodecConfig, Framing, LogConfig, setup_logging
from .core import (
    can_fit, embed, extract, embed_framed, extract_framed,
    encode_data, decode_data,
)
from .errors import (
    StegError, CapacityError, PayloadTruncatedError, TerminatorNotFoundError,
    AmbiguousPayloadError, ImageDecodeError, ImageEncodeError,
)
from .grid import Bounds, PixelGrid
from .image import hide_in_image, extract_from_image, get_image_capacity
from .scan import ScanOrder

__version__ = "1.0.0"
__all__ = [
    "can_fit",
    "embed",
    "extract",
    "embed_framed",
    "extract_framed",
    "encode_data",
    "decode_data",
    "hide_in_image",
    "extract_from_image",
    "get_image_capacity",
    "Bounds",
    "PixelGrid",
    "ScanOrder",
    "CodecConfig",
    "Framing",
    "LogConfig",
    "setup_logging",
    "StegError",
    "CapacityError",
    "PayloadTruncatedError",
    "TerminatorNotFoundError",
    "AmbiguousPayloadError",
    "ImageDecodeError",
    "ImageEncodeError",
]
