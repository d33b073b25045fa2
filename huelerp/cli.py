"""Command line entry point: ``huelerp --gradient-length N --colors HEX [HEX ...]``."""

import argparse
import sys
from typing import List, Optional, Sequence

from rich.console import Console

from . import __version__
from .errors import HueLerpError
from .gradient import Gradient1D
from .render import make_console, print_gradient


def split_colors(values: Sequence[str]) -> List[str]:
    """Flatten ``--colors`` values, each of which may hold several space-separated colors."""
    return [token for value in values for token in value.split()]


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huelerp",
        description="Print a linear HSL gradient between hex colors",
    )
    parser.add_argument(
        "--gradient-length",
        type=int,
        required=True,
        metavar="N",
        help="total number of colors to print; must exceed the number of --colors",
    )
    parser.add_argument(
        "--colors",
        nargs="+",
        required=True,
        metavar="HEX",
        help="control colors, with or without a leading '#'",
    )
    parser.add_argument(
        "--inline-colors",
        action="store_true",
        help="print the colors on one line, without swatches or RGB values",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)
    colors = split_colors(args.colors)

    try:
        gradient = Gradient1D.from_hex(colors, args.gradient_length)
    except HueLerpError as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")

    print_gradient(gradient.hex, inline=args.inline_colors, console=console or make_console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
