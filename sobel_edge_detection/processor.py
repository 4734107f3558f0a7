"""
processor.py
============

Apply Sobel edge detection to raw, grayscaled image data and return a
derivative image plus the gradient direction of every pixel.

Input is a flat row‑major buffer with *channel* interleaved 8‑bit samples
per pixel (only channel 0 is read).  Output is always 4‑channel RGBA:
the gradient magnitude, clipped to [0,255], repeated on R, G and B with
alpha fixed at 255.  ``thetas[i]`` describes output pixel *i*.

Bad input never raises.  A single diagnostic goes to the *warn* sink and
an empty result comes back; only the first failing check is reported.

Backends
--------
* **vectorised** – whole‑plane ``cv2.Sobel`` (default)
* **loop**       – per‑pixel double loop over ``kernels.convolve_x/y``

The default may be overridden with the ``SOBEL_METHOD`` environment
variable, which is checked once at import (unknown names raise
``ValueError`` there, not on every call).  Samples outside [0,255] are
saturated before the 8-bit cast.

Example
-------
```python
from sobel_edge_detection import apply_sobel

image_data, thetas = apply_sobel(raw, width, height, channels)
```
"""
from __future__ import annotations

import logging
import math
import numbers
import os
from typing import Any, Callable, Literal, Optional

import numpy as np

from .kernels import convolve_x, convolve_y
from .metadata import SobelResult, ThetaMetadata, empty_result
from .orientation import sobel_orientation

__all__ = [
    "DEFAULT_METHOD",
    "apply_sobel",
]

_LOGGER = logging.getLogger(__name__)

Method = Literal["vectorised", "loop"]
WarnSink = Callable[[str], None]

_CHANNELS = (1, 2, 3, 4)
_ALPHA = 255


# ----------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------
def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _as_flat_uint8(image_data: Any) -> np.ndarray:
    if isinstance(image_data, (bytes, bytearray, memoryview)):
        return np.frombuffer(image_data, dtype=np.uint8)
    data = np.asarray(image_data)
    if data.dtype == np.uint8:
        return data.reshape(-1)
    # saturate like a clamped 8-bit buffer instead of wrapping
    return np.clip(data, 0, 255).astype(np.uint8).reshape(-1)


def _validate(
    image_data: Any,
    width: Any,
    height: Any,
    channel: Any,
    warn: WarnSink,
) -> Optional[np.ndarray]:
    """Return the buffer as flat uint8, or None after warning once."""
    if image_data is None:
        warn(f"Provide ImageData. Received: {image_data}.")
        return None
    if not (_is_int(width) and _is_int(height)) or width <= 0 or height <= 0:
        warn(
            "Provide valid ImageData containing valid width and height. "
            f"Received width: {width} height: {height}."
        )
        return None
    if not _is_int(channel) or channel not in _CHANNELS:
        warn(f"Provide channel, either 1, 2, 3 or 4. Received channel: {channel}.")
        return None

    data = _as_flat_uint8(image_data)
    expected = width * height * channel
    if data.size != expected:
        warn(
            "Provide ImageData of length width * height * channel. "
            f"Received length: {data.size} expected: {expected}."
        )
        return None
    return data


# ----------------------------------------------------------------------
# Backends
# ----------------------------------------------------------------------
def _apply_loop(data: np.ndarray, width: int, height: int, channel: int) -> SobelResult:
    out = np.empty(width * height * 4, dtype=np.uint8)
    thetas = []
    i = 0
    for y in range(height):
        for x in range(width):
            g_x = convolve_x(x, y, width, height, data, channel)
            g_y = convolve_y(x, y, width, height, data, channel)
            magnitude = math.floor(math.sqrt(g_x * g_x + g_y * g_y))
            value = min(max(magnitude, 0), 255)
            out[i : i + 4] = (value, value, value, _ALPHA)
            thetas.append(ThetaMetadata(x, y, math.atan2(g_y, g_x)))
            i += 4
    return SobelResult(image_data=out, thetas=thetas)


def _apply_vectorised(data: np.ndarray, width: int, height: int, channel: int) -> SobelResult:
    plane = data.reshape(height, width, channel)[:, :, 0]
    theta, mag = sobel_orientation(plane, return_magnitude=True)

    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[..., :3] = np.clip(mag, 0, 255).astype(np.uint8)[..., None]
    rgba[..., 3] = _ALPHA

    ys, xs = np.divmod(np.arange(width * height), width)
    thetas = [
        ThetaMetadata(x, y, t)
        for x, y, t in zip(xs.tolist(), ys.tolist(), theta.ravel().tolist())
    ]
    return SobelResult(image_data=rgba.reshape(-1), thetas=thetas)


_BACKENDS = {
    "vectorised": _apply_vectorised,
    "loop": _apply_loop,
}

DEFAULT_METHOD: str = os.getenv("SOBEL_METHOD", "vectorised")
if DEFAULT_METHOD not in _BACKENDS:
    raise ValueError(
        f"Unknown sobel method in SOBEL_METHOD: {DEFAULT_METHOD} "
        f"(expected one of {sorted(_BACKENDS)})"
    )


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------
def apply_sobel(
    image_data: Any,
    width: int = 0,
    height: int = 0,
    channel: int = 1,
    *,
    method: Optional[Method] = None,
    warn: Optional[WarnSink] = None,
) -> SobelResult:
    """
    Apply Sobel's operator to *image_data* and return a derivative image.

    Parameters
    ----------
    image_data : array‑like | bytes | None
        Grayscaled raw image data, ``width*height*channel`` uint8 samples.
    width, height : int
        Image size in pixels (not zero indexed), both > 0.
    channel : int, default=1
        Samples per pixel in *image_data*, one of 1, 2, 3, 4.
    method : {'vectorised', 'loop'}, optional
        Backend; defaults to :data:`DEFAULT_METHOD`.
    warn : callable, optional
        Receives the diagnostic for rejected input.  Defaults to the
        module logger's ``warning``.

    Returns
    -------
    SobelResult
        ``image_data`` – flat uint8 RGBA buffer, ``width*height*4`` long.
        ``thetas``     – (x, y, theta) of every pixel, row‑major.
        Both are empty when the input was rejected.

    Raises
    ------
    ValueError
        If *method* names no known backend.
    """
    name = method or DEFAULT_METHOD
    backend = _BACKENDS.get(name)
    if backend is None:
        raise ValueError(f"Unknown sobel method: {name}")
    if warn is None:
        warn = _LOGGER.warning

    data = _validate(image_data, width, height, channel, warn)
    if data is None:
        return empty_result()

    result = backend(data, width, height, channel)
    _LOGGER.debug(
        "sobel applied: %dx%d, %d channel(s), method=%s", width, height, channel, name
    )
    return result
