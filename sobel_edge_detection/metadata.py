"""
metadata.py
===========

Result containers returned by :pyfunc:`processor.apply_sobel`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple

import numpy as np

__all__ = ["ThetaMetadata", "SobelResult", "empty_result"]


@dataclass(frozen=True, slots=True)
class ThetaMetadata:
    """
    Gradient direction of one pixel.

    ``x`` and ``y`` are in relation to the way a monitor draws graphics
    (origin top‑left, y downward); ``theta`` is in radians, (−π, π].
    """
    x: int
    y: int
    theta: float


class SobelResult(NamedTuple):
    """RGBA magnitude image plus one :class:`ThetaMetadata` per pixel, row‑major."""
    image_data: np.ndarray
    thetas: List[ThetaMetadata]


def empty_result() -> SobelResult:
    """Fresh result for rejected input."""
    return SobelResult(image_data=np.empty(0, dtype=np.uint8), thetas=[])
