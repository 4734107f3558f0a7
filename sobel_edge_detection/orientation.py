"""
orientation.py
==============

Whole‑plane Sobel gradients, magnitude and **orientation** (angle) for a
single‑channel 8‑bit image.  This is the vectorised counterpart of the
per‑pixel taps in ``kernels.py`` and produces exactly the same integers.

All functions expect a 2‑D **uint8** plane.  Derivatives are returned as
int16, which holds the full ±1020 range without rounding.

Border Convention
-----------------
Pixels outside the plane read as 0 (``cv2.BORDER_CONSTANT``), matching
``sampler.pixel_lookup``.

Angle Convention
----------------
The returned orientation is the signed **gradient direction**
θ = atan2(gy, gx) ∈ (−π, π], in monitor coordinates:

    θ = 0      → gradient points to +x (right)
    θ = π/2    → gradient points to +y (down)
    θ = π      → gradient points to −x (left)

Because the derivatives are integers there is no negative zero, so θ
never comes out as −π.

Public API
----------
* `sobel(plane) -> (gx, gy)`
* `sobel_orientation(plane, *, return_magnitude=False)`
"""
from __future__ import annotations

import cv2
import numpy as np
from typing import Tuple, Union

__all__ = [
    "sobel",
    "sobel_orientation",
]

# ---------------------------------------------------------------------
# Core helpers
# ---------------------------------------------------------------------
def _check_plane(plane: np.ndarray) -> None:
    if plane.ndim != 2:
        raise TypeError(f"Input plane must be 2-D, got shape {plane.shape}")
    if plane.dtype != np.uint8:
        raise TypeError("Input plane must be uint8 (range [0,255])")


def sobel(plane: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute x and y Sobel derivatives with zero padding.

    Parameters
    ----------
    plane : np.ndarray
        Grayscale uint8 image, shape (height, width).

    Returns
    -------
    gx, gy : np.ndarray
        int16 derivative images, same shape as *plane*.
    """
    _check_plane(plane)
    plane = np.array(plane, dtype=np.uint8, order="C")
    gx = cv2.Sobel(plane, cv2.CV_16S, 1, 0, ksize=3, borderType=cv2.BORDER_CONSTANT)
    gy = cv2.Sobel(plane, cv2.CV_16S, 0, 1, ksize=3, borderType=cv2.BORDER_CONSTANT)
    return gx, gy


def sobel_orientation(
    plane: np.ndarray,
    *,
    return_magnitude: bool = False,
) -> Union[np.ndarray, Tuple[np.ndarray, np.ndarray]]:
    """
    Compute gradient **orientation** (and optionally magnitude).

    Parameters
    ----------
    plane : np.ndarray
        Grayscale uint8 image.
    return_magnitude : bool, default=False
        If True, also return the gradient magnitude.

    Returns
    -------
    theta : np.ndarray, float64
        Orientation map in **radians**, range (−π, π].
    (optionally) mag : np.ndarray, int32
        floor(sqrt(gx²+gy²)), not clipped; can reach 1442.
    """
    gx, gy = sobel(plane)
    gx = gx.astype(np.int32)
    gy = gy.astype(np.int32)

    theta = np.arctan2(gy.astype(np.float64), gx.astype(np.float64))

    if return_magnitude:
        mag = np.floor(np.sqrt((gx * gx + gy * gy).astype(np.float64))).astype(np.int32)
        return theta, mag
    return theta
