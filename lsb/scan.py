"""
Pixel traversal orders shared by embed and extract
"""

from enum import Enum
from typing import Tuple

import numpy as np


class ScanOrder(Enum):
    ROW_MAJOR = "row-major"  # top to bottom, left to right
    COLUMN_MAJOR = "column-major"  # left to right, top to bottom
    SERPENTINE = "serpentine"  # row-major, odd rows right to left


def scan_indices(height: int, width: int,
                 order: ScanOrder = ScanOrder.ROW_MAJOR) -> Tuple[np.ndarray, np.ndarray]:
    """
    Row and column indices of every pixel, in visiting order.

    Args:
        height: grid height in pixels
        width: grid width in pixels
        order: traversal order

    Returns:
        (ys, xs) arrays of length height * width, relative to the grid origin
    """
    ys, xs = np.indices((height, width))

    if order is ScanOrder.ROW_MAJOR:
        return ys.reshape(-1), xs.reshape(-1)
    if order is ScanOrder.COLUMN_MAJOR:
        return ys.T.reshape(-1), xs.T.reshape(-1)
    if order is ScanOrder.SERPENTINE:
        xs[1::2] = xs[1::2, ::-1].copy()
        return ys.reshape(-1), xs.reshape(-1)

    raise ValueError(f"Unknown scan order: {order!r}")
