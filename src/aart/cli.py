import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from aart.charsets import RAMPS
from aart.config import DEFAULT_CELL_HEIGHT, DEFAULT_CELL_WIDTH, DEFAULT_SCALE, Config
from aart.converter import run
from aart.errors import AartError
from aart.source import open_image
from aart.terminal import fit_scale, get_terminal_size

MIN_SCALE = 0.01
MAX_SCALE = 1.0
MAX_CELL = 256

logger = logging.getLogger("aart")


def _cell_size(value: str) -> int:
    size = int(value)
    if not 1 <= size <= MAX_CELL:
        raise argparse.ArgumentTypeError(f"{size} is not in 1..={MAX_CELL}")
    return size


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aart", description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-s", "--scale", type=float, default=DEFAULT_SCALE, help="Image scaling factor (default: 1.0)"
    )
    parser.add_argument(
        "-x",
        "--char-width",
        type=_cell_size,
        default=DEFAULT_CELL_WIDTH,
        help=f"Character cell width in pixels (default: {DEFAULT_CELL_WIDTH})",
    )
    parser.add_argument(
        "-y",
        "--char-height",
        type=_cell_size,
        default=DEFAULT_CELL_HEIGHT,
        help=f"Character cell height in pixels (default: {DEFAULT_CELL_HEIGHT})",
    )
    parser.add_argument(
        "-r", "--ramp", default="standard", choices=sorted(RAMPS), help="Named glyph ramp (default: standard)"
    )
    parser.add_argument("-c", "--chars", default=None, help="Custom glyph ramp, sparsest to densest. Overrides --ramp.")
    parser.add_argument(
        "-f", "--fit", action="store_true", default=False, help="Pick the scale so the output fits the terminal width"
    )
    parser.add_argument("-j", "--workers", type=int, default=1, help="Threads used for sampling (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log progress to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not MIN_SCALE <= args.scale <= MAX_SCALE:
        print(f"error: scale must be between {MIN_SCALE} and {MAX_SCALE}", file=sys.stderr)
        return 1

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"error: file not found: {image_path}", file=sys.stderr)
        return 1

    ramp = args.chars if args.chars is not None else RAMPS[args.ramp]
    config = Config(scale=args.scale, cell_width=args.char_width, cell_height=args.char_height, ramp=ramp)

    try:
        image = open_image(image_path)
        if args.fit and image.width > 0:
            columns = get_terminal_size()[0]
            config = config.replace(scale=fit_scale(image.width, config.cell_width, columns, max_scale=args.scale))
            logger.debug("Fitting %d columns with scale %s", columns, config.scale)
        run(image, config, workers=args.workers)
    except (AartError, UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
