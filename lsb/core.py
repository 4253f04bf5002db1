"""
Core LSB steganography encoding/decoding functions

One hidden bit per pixel, stored in the least significant bit of the red
channel. Two framings are supported:

- terminator: pixel i carries ``payload[i] & 1``; every pixel past the end
  of the payload carries 0, and extraction stops at the first run of
  TERMINATOR_LENGTH zero bits. Extracted data is one 0x00/0x01 byte per pixel.
- length: a 32-bit big-endian length header followed by the payload bytes,
  8 bits per byte, most significant bit first.
"""

import logging

import numpy as np

from .config import CodecConfig, Framing
from .errors import (
    AmbiguousPayloadError, CapacityError, PayloadTruncatedError,
    TerminatorNotFoundError,
)
from .grid import Bounds, PixelGrid, RED
from .scan import ScanOrder, scan_indices
from .utils import bits_to_bytes, bytes_to_bits, bytes_to_int, int_to_bytes, payload_symbols

logger = logging.getLogger(__name__)

TERMINATOR_LENGTH = 8
LENGTH_HEADER_BITS = 32
CLEAR_LSB = 0xFE


def estimate_capacity(bounds: Bounds) -> int:
    """Capacity guard in bytes: W * H * 3 / 8, rounded down."""
    return (bounds.width * bounds.height * 3) // 8


def can_fit(bounds: Bounds, payload: bytes) -> bool:
    """
    Check whether a payload fits in an image of the given bounds.

    A payload of exactly estimate_capacity() bytes is rejected.
    """
    return len(payload) < estimate_capacity(bounds)


def framed_capacity(bounds: Bounds) -> int:
    """Maximum payload size in bytes for the length-prefixed framing."""
    return max(0, (bounds.area - LENGTH_HEADER_BITS) // 8)


def check_payload(payload: bytes) -> None:
    """
    Reject payloads the terminator framing cannot carry unambiguously.

    Raises:
        AmbiguousPayloadError: if the symbols contain TERMINATOR_LENGTH
            consecutive zeros, or end with a zero that would be absorbed
            into the terminator
    """
    symbols = payload_symbols(payload)
    if len(symbols) and symbols[-1] == 0:
        raise AmbiguousPayloadError(
            "Payload ends with a zero symbol, which would be read back as "
            "part of the terminator"
        )

    run = 0
    for i, symbol in enumerate(symbols):
        run = run + 1 if symbol == 0 else 0
        if run == TERMINATOR_LENGTH:
            raise AmbiguousPayloadError(
                f"Payload symbols {i - TERMINATOR_LENGTH + 1}..{i} are all zero "
                f"and would be read back as the terminator"
            )


def _write_red_lsbs(grid: PixelGrid, bits: np.ndarray, order: ScanOrder) -> PixelGrid:
    """Copy of grid with the first len(bits) pixels' red LSBs replaced."""
    pixels = grid.pixels.copy()
    ys, xs = scan_indices(grid.height, grid.width, order)
    ys, xs = ys[:len(bits)], xs[:len(bits)]

    pixels[ys, xs, RED] = (pixels[ys, xs, RED] & CLEAR_LSB) | bits
    return grid.with_pixels(pixels)


def _read_red_lsbs(grid: PixelGrid, order: ScanOrder) -> np.ndarray:
    """Red LSB of every pixel, in scan order."""
    ys, xs = scan_indices(grid.height, grid.width, order)
    return grid.pixels[ys, xs, RED] & 1


def embed(grid: PixelGrid, payload: bytes, order: ScanOrder = ScanOrder.ROW_MAJOR,
          strict: bool = False) -> PixelGrid:
    """
    Hide payload in grid using the terminator framing.

    Args:
        grid: source pixels (left untouched)
        payload: bytes to hide; each byte contributes its LSB to one pixel
        order: pixel traversal order
        strict: reject payloads that cannot be extracted intact

    Returns:
        New grid with identical bounds

    Raises:
        AmbiguousPayloadError: strict, and the payload would terminate early
        PayloadTruncatedError: strict, and the grid is too small for the
            payload plus terminator
    """
    pixel_count = len(grid)

    if strict:
        check_payload(payload)
        needed = len(payload) + TERMINATOR_LENGTH
        if needed > pixel_count:
            raise PayloadTruncatedError(
                f"Grid too small: {needed} pixels required, "
                f"but only {pixel_count} available"
            )

    # Pixels past the payload get 0, which forms the terminator
    bits = np.zeros(pixel_count, dtype=np.uint8)
    symbols = payload_symbols(payload)[:pixel_count]
    bits[:len(symbols)] = symbols

    if len(payload) > pixel_count:
        logger.debug(f"payload truncated: {len(payload)} symbols, {pixel_count} pixels")
    logger.debug(f"embedded {len(symbols)} symbols into {pixel_count} pixels ({order.value})")

    return _write_red_lsbs(grid, bits, order)


def extract(grid: PixelGrid, order: ScanOrder = ScanOrder.ROW_MAJOR,
            strict: bool = False) -> bytes:
    """
    Recover a payload hidden with the terminator framing.

    Args:
        grid: pixels with hidden data
        order: pixel traversal order used by embed
        strict: raise instead of guessing when no terminator is present

    Returns:
        One 0x00/0x01 byte per pixel read, terminator removed

    Raises:
        TerminatorNotFoundError: strict, and the scan ended without a terminator
    """
    extracted = bytearray()
    found = False
    run = 0

    for bit in _read_red_lsbs(grid, order):
        extracted.append(int(bit))
        run = run + 1 if bit == 0 else 0
        if run >= TERMINATOR_LENGTH:
            found = True
            break

    if not found:
        if strict:
            raise TerminatorNotFoundError(
                f"No terminator found in {len(grid)} pixels"
            )
        logger.debug(f"no terminator in {len(grid)} pixels, dropping last {TERMINATOR_LENGTH} values")

    del extracted[max(0, len(extracted) - TERMINATOR_LENGTH):]
    logger.debug(f"extracted {len(extracted)} symbols")
    return bytes(extracted)


def embed_framed(grid: PixelGrid, payload: bytes,
                 order: ScanOrder = ScanOrder.ROW_MAJOR) -> PixelGrid:
    """
    Hide payload in grid behind a 32-bit length header, 8 bits per byte.

    Pixels past the end of the frame are copied unchanged.

    Raises:
        CapacityError: if the frame needs more pixels than the grid has
    """
    data_bits = bytes_to_bits(int_to_bytes(len(payload), 4) + payload)

    max_bits = len(grid)
    if len(data_bits) > max_bits:
        raise CapacityError(
            f"Data too large: {len(data_bits)} bits required, "
            f"but only {max_bits} bits available"
        )

    logger.debug(f"embedded {len(payload)} bytes in {len(data_bits)} pixels ({order.value})")
    return _write_red_lsbs(grid, data_bits, order)


def extract_framed(grid: PixelGrid, order: ScanOrder = ScanOrder.ROW_MAJOR) -> bytes:
    """
    Recover a payload hidden with embed_framed.

    Raises:
        PayloadTruncatedError: if the header is missing or declares more
            data than the grid holds
    """
    extracted_bits = _read_red_lsbs(grid, order)

    if len(extracted_bits) < LENGTH_HEADER_BITS:
        raise PayloadTruncatedError("Not enough pixels to extract length header")

    payload_length = bytes_to_int(bits_to_bytes(extracted_bits[:LENGTH_HEADER_BITS]))

    total_bits_needed = LENGTH_HEADER_BITS + payload_length * 8
    if total_bits_needed > len(extracted_bits):
        raise PayloadTruncatedError(
            f"Header declares {payload_length} bytes, "
            f"but only {framed_capacity(grid.bounds)} fit in the grid"
        )

    return bits_to_bytes(extracted_bits[LENGTH_HEADER_BITS:total_bits_needed])


def encode_data(grid: PixelGrid, payload: bytes, config: CodecConfig = None) -> PixelGrid:
    """Hide payload in grid with the framing and scan order from config."""
    config = config or CodecConfig()
    if config.framing is Framing.LENGTH:
        return embed_framed(grid, payload, config.scan_order)
    return embed(grid, payload, config.scan_order, strict=config.strict)


def decode_data(grid: PixelGrid, config: CodecConfig = None) -> bytes:
    """Recover a payload with the framing and scan order from config."""
    config = config or CodecConfig()
    if config.framing is Framing.LENGTH:
        return extract_framed(grid, config.scan_order)
    return extract(grid, config.scan_order, strict=config.strict)


def payload_fits(bounds: Bounds, payload: bytes, config: CodecConfig = None) -> bool:
    """Capacity check matching the framing in config."""
    config = config or CodecConfig()
    if config.framing is Framing.LENGTH:
        return len(payload) <= framed_capacity(bounds)
    return can_fit(bounds, payload)


def capacity_for(bounds: Bounds, config: CodecConfig = None) -> int:
    """Capacity in bytes matching the framing in config."""
    config = config or CodecConfig()
    if config.framing is Framing.LENGTH:
        return framed_capacity(bounds)
    return estimate_capacity(bounds)
