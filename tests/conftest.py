"""
redlsb Test Fixtures
"""

import numpy as np
import pytest
from PIL import Image

from lsb.grid import PixelGrid


@pytest.fixture
def red_200_grid() -> PixelGrid:
    """4x4 grid, every pixel (200, 10, 20, 255)."""
    return PixelGrid.filled(4, 4, (200, 10, 20, 255))


@pytest.fixture
def noisy_grid() -> PixelGrid:
    """32x24 grid of deterministic pseudo-random pixels."""
    rng = np.random.default_rng(1234)
    return PixelGrid(rng.integers(0, 256, size=(24, 32, 4), dtype=np.uint8))


@pytest.fixture
def png_path(tmp_path):
    """A 40x30 RGBA PNG on disk."""
    rng = np.random.default_rng(99)
    pixels = rng.integers(0, 256, size=(30, 40, 4), dtype=np.uint8)
    path = tmp_path / "carrier.png"
    Image.fromarray(pixels).save(path, format="PNG")
    return path
