import numpy as np


def render_rows(indices: np.ndarray, ramp: str) -> list[str]:
    """Turn a (rows, cols) array of ramp indices into one string per row."""
    return ["".join(ramp[i] for i in row) for row in indices.tolist()]


def render_text(rows: list[str], terminator: str = "\n") -> str:
    """Join rows with a single terminator between them and none after the last."""
    return terminator.join(rows)
