"""
Utility functions for payload handling
"""

from pathlib import Path

import numpy as np


def bytes_to_bits(data: bytes) -> np.ndarray:
    """Convert bytes to an array of bits, most significant bit first."""
    return np.unpackbits(np.frombuffer(data, dtype=np.uint8))


def bits_to_bytes(bits: np.ndarray) -> bytes:
    """Convert an array of bits back to bytes, zero-padding the last byte."""
    return np.packbits(np.asarray(bits, dtype=np.uint8)).tobytes()


def int_to_bytes(value: int, length: int = 4) -> bytes:
    """Convert integer to bytes (big-endian)."""
    return value.to_bytes(length, byteorder='big')


def bytes_to_int(data: bytes) -> int:
    """Convert bytes to integer (big-endian)."""
    return int.from_bytes(data, byteorder='big')


def payload_symbols(data: bytes) -> np.ndarray:
    """The hidden bit each payload byte contributes (its LSB)."""
    return np.frombuffer(data, dtype=np.uint8) & 1


def read_secret(path: str) -> bytes:
    """Read the full contents of a secret file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, 'rb') as f:
        return f.read()


def format_symbols(data: bytes) -> str:
    """Render a 0x00/0x01 symbol sequence as a bit string."""
    return ''.join('1' if b else '0' for b in data)


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.2f} TB"
