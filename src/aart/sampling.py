import logging
import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from aart.config import Config
from aart.errors import EmptyImage

logger = logging.getLogger(__name__)

# Rec. 601 luma weights in thousandths, so block totals stay exact integers
LUMA_WEIGHTS = (299, 587, 114)
LUMA_SCALE = 1000


def grid_shape(width: int, height: int, config: Config) -> tuple[int, int]:
    """Return (rows, cols) of the character grid for an image of the given size."""
    if width <= 0 or height <= 0:
        raise EmptyImage(f"Image has no pixels: {width}x{height}")
    rows = math.ceil(height * config.scale / config.cell_height)
    cols = math.ceil(width * config.scale / config.cell_width)
    return rows, cols


def block_edges(length: int, count: int, cell: int, scale: float) -> list[tuple[int, int]]:
    """Split ``[0, length)`` into ``count`` half-open source-pixel ranges.

    Block ``i`` covers ``[floor(i * cell / scale), floor((i + 1) * cell / scale))``
    clipped to the image. The last block always runs to ``length``. A block
    narrower than one pixel (upscaling) takes the single pixel at its start.
    """
    edges = []
    for i in range(count):
        start = min(math.floor(i * cell / scale), length - 1)
        stop = length if i == count - 1 else min(math.floor((i + 1) * cell / scale), length)
        if stop <= start:
            stop = start + 1
        edges.append((start, stop))
    return edges


def luma_milli(pixels: np.ndarray) -> np.ndarray:
    """Per-pixel luma of an ``(H, W, 3)`` array, in thousandths, as int64."""
    rgb = pixels.astype(np.int64)
    wr, wg, wb = LUMA_WEIGHTS
    return wr * rgb[:, :, 0] + wg * rgb[:, :, 1] + wb * rgb[:, :, 2]


def luma(pixels: np.ndarray) -> np.ndarray:
    """Per-pixel luma ``0.299 r + 0.587 g + 0.114 b`` in [0, 255]."""
    return luma_milli(pixels) / LUMA_SCALE


def sample_block(lum: np.ndarray, y0: int, y1: int, x0: int, x1: int) -> float:
    """Average brightness of one block of a :func:`luma_milli` array."""
    block = lum[y0:y1, x0:x1]
    count = block.size
    total = 0
    for row in block:
        total += int(row.sum())
    return total / (LUMA_SCALE * count)


def sample_grid(pixels: np.ndarray, config: Config, workers: int | None = None) -> np.ndarray:
    """Average luma of every cell block. Returns float64 array of shape (rows, cols).

    With ``workers`` greater than one, rows are shared out over a thread pool.
    Each row is written by exactly one task, so the result does not depend on
    the worker count.
    """
    height, width = pixels.shape[:2]
    rows, cols = grid_shape(width, height, config)
    y_edges = block_edges(height, rows, config.cell_height, config.scale)
    x_edges = block_edges(width, cols, config.cell_width, config.scale)
    lum = luma_milli(pixels)
    result = np.empty((rows, cols), dtype=np.float64)

    def fill_row(r: int) -> None:
        y0, y1 = y_edges[r]
        for c, (x0, x1) in enumerate(x_edges):
            result[r, c] = sample_block(lum, y0, y1, x0, x1)

    logger.debug("Sampling %dx%d image into %d rows x %d cols", width, height, rows, cols)
    if workers is not None and workers > 1 and rows > 1:
        logger.debug("Sharding %d rows over %d workers", rows, workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # Consuming the iterator re-raises worker errors and waits for every row
            for _ in executor.map(fill_row, range(rows)):
                pass
    else:
        for r in range(rows):
            fill_row(r)
    return result
