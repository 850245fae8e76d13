import dataclasses
import math
import numbers
from dataclasses import dataclass

from aart.charsets import DEFAULT_RAMP
from aart.errors import InvalidConfiguration

DEFAULT_SCALE = 1.0
DEFAULT_CELL_WIDTH = 10
DEFAULT_CELL_HEIGHT = 18


@dataclass(frozen=True)
class Config:
    """Conversion settings shared by every pipeline stage.

    ``cell_width`` and ``cell_height`` are the pixel footprint of one output
    character before scaling. ``ramp`` runs from the visually sparsest glyph
    to the densest.
    """

    scale: float = DEFAULT_SCALE
    cell_width: int = DEFAULT_CELL_WIDTH
    cell_height: int = DEFAULT_CELL_HEIGHT
    ramp: str = DEFAULT_RAMP

    def validate(self) -> "Config":
        if isinstance(self.scale, bool) or not isinstance(self.scale, numbers.Real):
            raise InvalidConfiguration(f"scale must be a number, got {self.scale!r}")
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise InvalidConfiguration(f"scale must be positive, got {self.scale}")
        for name in ("cell_width", "cell_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidConfiguration(f"{name} must be positive, got {value}")
        if not self.ramp:
            raise InvalidConfiguration("glyph ramp must contain at least one character")
        return self

    def replace(self, **changes) -> "Config":
        return dataclasses.replace(self, **changes)
