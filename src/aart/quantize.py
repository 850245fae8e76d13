import math

import numpy as np

# Brightness values are bucketed over [0, 256) so 255 lands in the last bucket
LEVELS = 256


def bucket(brightness: float, ramp_length: int) -> int:
    """Map a brightness in [0, 255] to an index into a sparse-to-dense ramp.

    The bucket ``floor(brightness / 256 * ramp_length)`` counts from the dense
    end: black picks the densest glyph, white the sparsest.
    """
    if math.isnan(brightness):
        brightness = 0.0
    index = math.floor(min(max(brightness, 0.0), LEVELS) / LEVELS * ramp_length)
    index = min(max(index, 0), ramp_length - 1)
    return ramp_length - 1 - index


def quantize(brightness: float, ramp: str) -> str:
    return ramp[bucket(brightness, len(ramp))]


def quantize_grid(grid: np.ndarray, ramp_length: int) -> np.ndarray:
    """Vectorised :func:`bucket` over a brightness array."""
    clean = np.clip(np.nan_to_num(grid, nan=0.0), 0.0, LEVELS)
    index = np.floor(clean / LEVELS * ramp_length).astype(np.int64)
    index = np.clip(index, 0, ramp_length - 1)
    return ramp_length - 1 - index
