"""
In-memory pixel grid passed between the image layer and the codec
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

RED, GREEN, BLUE, ALPHA = range(4)


@dataclass(frozen=True)
class Bounds:
    """Pixel rectangle; max coordinates are exclusive."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return max(0, self.max_x - self.min_x)

    @property
    def height(self) -> int:
        return max(0, self.max_y - self.min_y)

    @property
    def area(self) -> int:
        return self.width * self.height

    @classmethod
    def of_size(cls, width: int, height: int) -> "Bounds":
        return cls(0, 0, width, height)


class PixelGrid:
    """
    RGBA pixels of a decoded image.

    Holds an (height, width, 4) uint8 array. The array is made read-only so
    the codec can only produce new grids, never edit an existing one.
    """

    def __init__(self, pixels: np.ndarray, bounds: Bounds = None):
        pixels = np.array(pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected (height, width, 4) pixels, got shape {pixels.shape}")

        if bounds is None:
            bounds = Bounds.of_size(pixels.shape[1], pixels.shape[0])
        if (bounds.height, bounds.width) != pixels.shape[:2]:
            raise ValueError(
                f"Bounds {bounds.width}x{bounds.height} do not match "
                f"pixels {pixels.shape[1]}x{pixels.shape[0]}"
            )

        pixels.setflags(write=False)
        self._pixels = pixels
        self.bounds = bounds

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def __len__(self) -> int:
        return self.bounds.area

    def at(self, x: int, y: int) -> tuple:
        """RGBA tuple of the pixel at absolute coordinates (x, y)."""
        r, g, b, a = self._pixels[y - self.bounds.min_y, x - self.bounds.min_x]
        return int(r), int(g), int(b), int(a)

    def with_pixels(self, pixels: np.ndarray) -> "PixelGrid":
        """New grid with the same bounds and the given pixel data."""
        return PixelGrid(pixels, self.bounds)

    @classmethod
    def filled(cls, width: int, height: int, rgba=(0, 0, 0, 255)) -> "PixelGrid":
        """Grid of a single solid color."""
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[...] = rgba
        return cls(pixels)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.bounds == other.bounds and np.array_equal(self._pixels, other._pixels)

    def __repr__(self) -> str:
        b = self.bounds
        return f"PixelGrid({b.width}x{b.height} at ({b.min_x}, {b.min_y}))"
