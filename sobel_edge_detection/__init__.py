"""
sobel_edge_detection
====================

Sobel edge detection over flat 8‑bit pixel buffers.

* :pyfunc:`apply_sobel`      – full image → RGBA magnitude + per‑pixel θ
* :pyfunc:`convolve_x` / :pyfunc:`convolve_y` – gradients at one pixel
* :pyfunc:`pixel_lookup`     – zero‑padded sample lookup
* :pyfunc:`sobel` / :pyfunc:`sobel_orientation` – whole‑plane numpy maps
"""
from __future__ import annotations

from .kernels import KERNEL_X, KERNEL_Y, convolve_x, convolve_y
from .metadata import SobelResult, ThetaMetadata
from .orientation import sobel, sobel_orientation
from .processor import DEFAULT_METHOD, apply_sobel
from .sampler import pixel_lookup

__all__ = [
    "DEFAULT_METHOD",
    "KERNEL_X",
    "KERNEL_Y",
    "SobelResult",
    "ThetaMetadata",
    "apply_sobel",
    "convolve_x",
    "convolve_y",
    "pixel_lookup",
    "sobel",
    "sobel_orientation",
]
