# All ramps run from visually sparsest to densest.

# Paul Bourke's 70-level greyscale ramp
STANDARD = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

SIMPLE = " .:-=+*#%@"

SHORT = " .:oO@"

# Light, medium and dark shade plus full block (U+2591-U+2593, U+2588)
BLOCKS = " ░▒▓█"

BINARY = " #"

RAMPS = {
    "standard": STANDARD,
    "simple": SIMPLE,
    "short": SHORT,
    "blocks": BLOCKS,
    "binary": BINARY,
}

DEFAULT_RAMP = STANDARD
