"""
kernels.py
==========

The two fixed 3×3 Sobel kernels and their application at a single
coordinate.

Kernels are row‑major: row 0 is ``y-1``, row 2 is ``y+1``; column 0 is
``x-1``, column 2 is ``x+1``.

    KERNEL_X = [-1 0 1; -2 0 2; -1 0 1]
    KERNEL_Y = [-1 -2 -1; 0 0 0; 1 2 1]

Results are signed ints bounded by ±1020 for 8‑bit input.  Taps with a
zero weight (the centre, and the middle row/column) are never sampled.

Public API
----------
* `convolve_x(x, y, width, height, data, channel) -> int`
* `convolve_y(x, y, width, height, data, channel) -> int`
"""
from __future__ import annotations

from typing import Sequence, Tuple

from .sampler import pixel_lookup

__all__ = [
    "KERNEL_X",
    "KERNEL_Y",
    "convolve_x",
    "convolve_y",
]

Kernel = Tuple[Tuple[int, int, int], Tuple[int, int, int], Tuple[int, int, int]]

KERNEL_X: Kernel = (
    (-1, 0, 1),
    (-2, 0, 2),
    (-1, 0, 1),
)

KERNEL_Y: Kernel = (
    (-1, -2, -1),
    (0, 0, 0),
    (1, 2, 1),
)


# ---------------------------------------------------------------------
# Shared tap loop
# ---------------------------------------------------------------------
def _convolve(
    kernel: Kernel,
    x: int,
    y: int,
    width: int,
    height: int,
    data: Sequence[int],
    channel: int,
) -> int:
    total = 0
    for row, weights in enumerate(kernel):
        for col, weight in enumerate(weights):
            if weight == 0:
                continue
            total += weight * pixel_lookup(
                x + col - 1, y + row - 1, width, height, data, channel
            )
    return total


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------
def convolve_x(
    x: int,
    y: int,
    width: int,
    height: int,
    data: Sequence[int],
    channel: int,
) -> int:
    """
    Horizontal gradient gX at *(x, y)*.

    Parameters are those of :pyfunc:`sampler.pixel_lookup`.

    Returns
    -------
    int – in [-1020, 1020]; positive when intensity rises to the right.
    """
    return _convolve(KERNEL_X, x, y, width, height, data, channel)


def convolve_y(
    x: int,
    y: int,
    width: int,
    height: int,
    data: Sequence[int],
    channel: int,
) -> int:
    """Vertical gradient gY at *(x, y)*; positive when intensity rises downward."""
    return _convolve(KERNEL_Y, x, y, width, height, data, channel)
