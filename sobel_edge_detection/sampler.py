"""
sampler.py
==========

Bounds‑checked pixel lookup into a flat, interleaved 8‑bit buffer.

Coordinates follow the way a monitor draws graphics: **(x,y)** with the
origin at the top‑left, x growing rightward and y downward.  Only the
first channel of every pixel is read; the remaining channels still
occupy the stride.

Anything outside ``[0,width) × [0,height)`` reads as **0**, which is the
zero‑padding boundary condition of the convolution in ``kernels.py``.
"""
from __future__ import annotations

from typing import Sequence

__all__ = ["pixel_lookup"]


def pixel_lookup(
    x: int,
    y: int,
    width: int,
    height: int,
    data: Sequence[int],
    channel: int,
) -> int:
    """
    Sample at *(x, y)*, or 0 when the coordinate is off the image.

    Parameters
    ----------
    x, y : int
        Pixel coordinate; may be negative or past the edge.
    width, height : int
        Bounding size of the image (not zero indexed).
    data : Sequence[int]
        Row‑major buffer holding ``width*height*channel`` samples.
    channel : int
        Pixel stride, 1 (grayscale) to 4 (RGBA).

    Returns
    -------
    int – channel‑0 sample of the addressed pixel.
    """
    if x < 0 or y < 0 or x >= width or y >= height:
        return 0
    # int() so that numpy uint8 samples never wrap in signed sums
    return int(data[(width * y + x) * channel])
