import logging
import sys
from pathlib import Path
from typing import TextIO

import numpy as np
from PIL import Image

from aart.config import Config
from aart.quantize import quantize_grid
from aart.render import render_rows, render_text
from aart.sampling import sample_grid
from aart.source import pixel_array

logger = logging.getLogger(__name__)

ImageInput = Image.Image | np.ndarray | str | Path


def convert_image(image: ImageInput, config: Config | None = None, workers: int | None = None) -> list[str]:
    """Convert an image to rows of glyphs, one string per row.

    The configuration is checked before the image is opened, and nothing is
    returned until every cell has been sampled.
    """
    config = (config or Config()).validate()
    pixels = pixel_array(image)
    logger.debug(
        "Converting %dx%d image: scale=%s cell=%dx%d ramp=%d glyphs",
        pixels.shape[1],
        pixels.shape[0],
        config.scale,
        config.cell_width,
        config.cell_height,
        len(config.ramp),
    )
    brightness = sample_grid(pixels, config, workers=workers)
    indices = quantize_grid(brightness, len(config.ramp))
    return render_rows(indices, config.ramp)


def image_to_ascii(image: ImageInput, config: Config | None = None, workers: int | None = None) -> str:
    return render_text(convert_image(image, config, workers=workers))


def run(
    image: ImageInput,
    config: Config | None = None,
    out: TextIO | None = None,
    workers: int | None = None,
) -> None:
    """Convert ``image`` and write the result, newline-terminated, to ``out``."""
    text = image_to_ascii(image, config, workers=workers)
    if out is None:
        out = sys.stdout
    out.write(text + "\n")
