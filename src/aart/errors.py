class AartError(Exception):
    """Base class for errors raised by the conversion pipeline."""


class InvalidConfiguration(AartError, ValueError):
    """Scale, cell size or glyph ramp is unusable."""


class EmptyImage(AartError, ValueError):
    """The source image has no pixels along one of its axes."""
