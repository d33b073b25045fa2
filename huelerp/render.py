"""Terminal presentation of gradient colors."""

from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from .conversions import decode_hex
from .types.color_types import RGBTriple

SWATCH_WIDTH = 5


def make_console(**kwargs) -> Console:
    """Console set up for 24-bit color with rich's highlighting turned off."""
    kwargs.setdefault("color_system", "truecolor")
    kwargs.setdefault("highlight", False)
    return Console(**kwargs)


def foreground(rgb: RGBTriple) -> str:
    r, g, b = rgb
    return f"rgb({r},{g},{b})"


def background(rgb: RGBTriple) -> str:
    return f"on {foreground(rgb)}"


def color_line(hex_color: str) -> Text:
    """``<hex> <swatch> (<r>, <g>, <b>)`` with hex and readout in the color itself."""
    rgb = decode_hex(hex_color)
    r, g, b = rgb
    line = Text()
    line.append(hex_color, style=foreground(rgb))
    line.append(" ")
    line.append(" " * SWATCH_WIDTH, style=background(rgb))
    line.append(" ")
    line.append(f"({r}, {g}, {b})", style=foreground(rgb))
    return line


def print_hex_color(console: Console, hex_color: str, inline: bool = False) -> None:
    """
    Render one gradient color.

    Inline output has no trailing newline, so the console file is flushed
    after each color.
    """
    if inline:
        text = Text(hex_color, style=foreground(decode_hex(hex_color)))
        console.print(text, end=" ", soft_wrap=True)
        console.file.flush()
        return
    console.print(color_line(hex_color), soft_wrap=True)


def print_gradient(hex_colors: Iterable[str], inline: bool = False, console: Optional[Console] = None) -> None:
    console = console or make_console()
    for hex_color in hex_colors:
        print_hex_color(console, hex_color, inline)
