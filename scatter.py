#!/usr/bin/env python3
"""
Scatter diagram of two equally-sized images.

For every sampled pixel the intensity in infile1 becomes x and the intensity
in infile2 becomes y; a white point is drawn at (x, y) on a 256x256 canvas,
one canvas per channel.
"""

import os
import sys
import logging
import argparse
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

# --- Centralized Logging Configuration ---
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
    datefmt='%H:%M:%S'
)

from models.errors import ScatterError, ArgumentError
from pipeline.scatter_diagram import build_scatter_diagram, DEFAULT_SCALE

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    """Reports bad arguments as ArgumentError instead of exiting with status 2."""

    def error(self, message):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(
        prog="scatter",
        description="Plot the paired pixel intensities of two images as a 256x256 scatter diagram.",
        add_help=False,
    )
    ap.add_argument("-h", "-help", action="help",
                    help="show this help message and exit")
    ap.add_argument("-s", dest="scale", type=int, default=DEFAULT_SCALE,
                    help=f"maximum width/height the images are shrunk to before sampling (default {DEFAULT_SCALE})")
    ap.add_argument("-m", dest="mirror", action="store_true",
                    help="flip the diagram vertically so the origin is bottom-left")
    ap.add_argument("infile1", help="image providing the x coordinates")
    ap.add_argument("infile2", help="image providing the y coordinates")
    ap.add_argument("outfile", help="output image; format follows the extension")
    return ap


def parse_args(argv=None) -> argparse.Namespace:
    args = build_parser().parse_args(argv)
    if args.scale <= 0:
        raise ArgumentError(f"scale must be a positive integer, got {args.scale}")
    return args


def main(argv=None) -> int:
    try:
        args = parse_args(argv)
    except SystemExit as exc:  # -h / -help
        return exc.code or 0
    except ArgumentError as err:
        print(f"scatter: {err}", file=sys.stderr)
        build_parser().print_usage(sys.stderr)
        return 1

    try:
        build_scatter_diagram(
            args.infile1, args.infile2, args.outfile,
            scale=args.scale,
            mirror=args.mirror,
        )
    except (ScatterError, OSError, ValueError) as err:
        print(f"scatter: {err}", file=sys.stderr)
        return 1

    logger.info(f"Scatter diagram written to {args.outfile}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
