"""
Image steganography module
Supports: PNG, JPEG
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from .config import CodecConfig
from .core import capacity_for, decode_data, encode_data, payload_fits
from .errors import CapacityError, ImageDecodeError, ImageEncodeError
from .grid import Bounds, PixelGrid
from .utils import format_size

logger = logging.getLogger(__name__)

# Supported extensions and the Pillow format that writes them
SUPPORTED_EXTENSIONS = {'.jpg': 'JPEG', '.png': 'PNG'}
OUTPUT_STEM = 'encoded_image'


def is_supported(image_path: str) -> bool:
    """True if the path ends in one of the supported extensions."""
    return Path(image_path).suffix.lower() in SUPPORTED_EXTENSIONS


def load_grid(image_path: str) -> PixelGrid:
    """
    Open an image file and decode it to an RGBA pixel grid.

    Raises:
        ImageDecodeError: if the file cannot be read or decoded
    """
    logger.debug(f"opening image {image_path}")
    try:
        with Image.open(image_path) as img:
            # Image.open is lazy; convert() forces the decode inside the try
            rgba = img.convert('RGBA')
    except (OSError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"failed to decode image ({image_path}): {e}") from e

    return PixelGrid(np.asarray(rgba), Bounds.of_size(*rgba.size))


def save_grid(grid: PixelGrid, output_path: str) -> str:
    """
    Encode a pixel grid into an image file; format follows the extension.

    JPEG has no alpha channel, so alpha is dropped. JPEG is lossy and will
    not preserve hidden bits.

    Raises:
        ImageEncodeError: if the extension is unsupported or writing fails
    """
    ext = Path(output_path).suffix.lower()
    fmt = SUPPORTED_EXTENSIONS.get(ext)
    if fmt is None:
        raise ImageEncodeError(f"unsupported output format: {output_path}")

    img = Image.fromarray(np.ascontiguousarray(grid.pixels))
    if fmt == 'JPEG':
        logger.warning("JPEG output is lossy; hidden data will likely not survive")
        img = img.convert('RGB')

    logger.debug(f"encoding image {output_path}")
    try:
        img.save(output_path, format=fmt)
    except OSError as e:
        raise ImageEncodeError(f"failed to encode file ({output_path}): {e}") from e

    return output_path


def output_path_for(image_path: str, output_dir: str = ".") -> str:
    """Output file name: encoded_image.<ext of input> in output_dir."""
    ext = Path(image_path).suffix.lower()
    return str(Path(output_dir) / f"{OUTPUT_STEM}{ext}")


def get_image_capacity(image_path: str, config: CodecConfig = None) -> int:
    """
    Get maximum data capacity of an image in bytes.

    For the terminator framing this is the W * H * 3 / 8 guard; a payload
    must be strictly smaller than it.
    """
    return capacity_for(load_grid(image_path).bounds, config)


def hide_in_image(image_path: str, payload: bytes, output_dir: str = ".",
                  config: CodecConfig = None) -> str:
    """
    Hide data in an image using LSB steganography.

    Args:
        image_path: path to host image
        payload: bytes to hide
        output_dir: directory for encoded_image.<ext>
        config: codec settings

    Returns:
        Path to output image

    Raises:
        CapacityError: if the payload does not fit
    """
    config = config or CodecConfig()
    grid = load_grid(image_path)

    capacity = capacity_for(grid.bounds, config)
    logger.debug(f"image is {grid.width}x{grid.height}, capacity {format_size(capacity)}")
    if not payload_fits(grid.bounds, payload, config):
        raise CapacityError(
            f"Data too large for image. Data: {format_size(len(payload))}, "
            f"Capacity: {format_size(capacity)}"
        )

    encoded = encode_data(grid, payload, config)
    return save_grid(encoded, output_path_for(image_path, output_dir))


def extract_from_image(image_path: str, config: CodecConfig = None) -> bytes:
    """Extract hidden data from an image."""
    return decode_data(load_grid(image_path), config)
