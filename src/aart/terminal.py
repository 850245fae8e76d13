import math
import os
import sys

FALLBACK_SIZE = (80, 24)


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return FALLBACK_SIZE
    try:
        size = os.get_terminal_size()
    except OSError:
        return FALLBACK_SIZE
    return (size.columns, size.lines)


def fit_scale(image_width: int, cell_width: int, columns: int, max_scale: float = 1.0) -> float:
    """Largest scale, capped at ``max_scale``, whose grid fits in ``columns``."""
    scale = min(max_scale, columns * cell_width / image_width)
    # Float rounding can push the ceiling one column over
    while math.ceil(image_width * scale / cell_width) > columns:
        scale = math.nextafter(scale, 0.0)
    return scale
