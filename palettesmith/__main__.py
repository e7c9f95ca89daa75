"""
CLI: Generate one harmony palette and print it.
Usage:
  python -m palettesmith --harmony triad --count 6
  python -m palettesmith --harmony monochromatic --count 5 --format rgb
  python -m palettesmith --count 4 --seed 7 --swatch palette.png
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from palettesmith.config import config
from palettesmith.schemas import PaletteRequest
from palettesmith.services.colors.palette import PaletteBuilder, PaletteGenerationExhausted
from palettesmith.services.display import SwatchDisplaySink, TextDisplaySink
from palettesmith.services.session import PaletteSession
from palettesmith.utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palettesmith",
        description="Generate a color palette from a harmony rule.",
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=config.DEFAULT_COUNT,
        help=f"Number of colors (default: {config.DEFAULT_COUNT}).",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=config.SUPPORTED_FORMATS,
        default=config.DEFAULT_FORMAT,
        help=f"Output format (default: {config.DEFAULT_FORMAT}).",
    )
    parser.add_argument(
        "--harmony",
        type=str,
        default=config.DEFAULT_HARMONY,
        help="complementary, analogous, monochromatic or triad; anything else draws random colors.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Optional random seed for reproducibility.",
    )
    parser.add_argument(
        "--swatch",
        type=Path,
        default=None,
        help="Also write a PNG swatch strip to this path.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log = get_logger()

    try:
        request = PaletteRequest(count=args.count, format=args.format, harmony=args.harmony)
    except ValidationError as e:
        log.error("Invalid palette request", extra={"errors": e.errors()})
        return 2

    session = PaletteSession(PaletteBuilder(seed=args.seed))
    try:
        session.generate(request)
    except PaletteGenerationExhausted as e:
        log.for_palette(harmony=request.harmony).error(
            str(e), extra={"attempts": e.attempts, "collected": e.collected}
        )
        return 1

    session.render(TextDisplaySink(sys.stdout), request.format)
    if args.swatch is not None:
        session.render(SwatchDisplaySink(args.swatch), request.format)
        log.info("Swatch written", extra={"path": str(args.swatch)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
