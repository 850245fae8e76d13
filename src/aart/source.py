from pathlib import Path

import numpy as np
from PIL import Image

from aart.errors import EmptyImage


def open_image(image: Image.Image | str | Path) -> Image.Image:
    """Decode ``image`` if it is a path and flatten it to RGB."""
    if not isinstance(image, Image.Image):
        with Image.open(image) as opened:
            opened.load()
            return opened.convert("RGB")
    return image.convert("RGB")


def pixel_array(image: Image.Image | np.ndarray | str | Path) -> np.ndarray:
    """Return a read-only ``(H, W, 3)`` uint8 array of the image's pixels.

    Accepts a PIL image, a path Pillow can open, or an array shaped
    ``(H, W)`` (grey), ``(H, W, 3)`` (RGB) or ``(H, W, 4)`` (RGBA). Alpha is
    discarded.
    """
    if isinstance(image, np.ndarray):
        arr = image
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, None], 3, axis=2)
        elif arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError(f"Unsupported pixel array shape: {arr.shape}")
        arr = arr[:, :, :3]
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError("Pixel values must lie in [0, 255]")
        arr = np.array(arr, dtype=np.uint8)
    else:
        img = open_image(image)
        if img.width == 0 or img.height == 0:
            raise EmptyImage(f"Image has no pixels: {img.width}x{img.height}")
        arr = np.array(img, dtype=np.uint8)

    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise EmptyImage(f"Image has no pixels: {arr.shape[1]}x{arr.shape[0]}")
    arr.flags.writeable = False
    return arr
