import numpy as np
import pytest


# 3×3 grayscale fixture, row-major
LOOKUP_PIXELS = [124, 145, 96, 204, 221, 243, 165, 219, 143]


@pytest.fixture
def lookup_pixels():
    return np.array(LOOKUP_PIXELS, dtype=np.uint8)


@pytest.fixture
def warnings_sink():
    return []


def interleave(gray, channel, filler=7):
    """Spread *gray* samples into channel 0 of a *channel*-wide buffer."""
    out = np.full(len(gray) * channel, filler, dtype=np.uint8)
    out[::channel] = gray
    return out
