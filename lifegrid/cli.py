"""Command-line interface for lifegrid."""

import argparse
import sys
from typing import Callable

from . import __version__
from .config import NEIGHBORHOODS, SimulationConfig
from .core.render import ALIVE_GLYPH, DEAD_GLYPH

EPILOG = """\
Examples:
  lifegrid
  lifegrid --width 60 --height 30 --interval 200
  lifegrid -W 80 -H 40 --generations 500 -o life.mp4
  lifegrid -W 32 -H 32 --generations 100 --neighborhood circle --extent 3 -o final.png

Width, height and interval are prompted for when not given.
Without --output the grid is drawn in the terminal; press Enter to stop.

Neighborhoods:
  square    Moore neighborhood, the classic 3x3 block at extent 2
  cross     Plus-sign shape (von Neumann neighborhood)
  diagonal  Diagonal cross
  circle    Disk of radius extent - 1
"""


def prompt_for_int(
    message: str, minimum: int = 0, input_fn: Callable[[str], str] = input
) -> int:
    """Ask the user for an integer until a valid one is entered.

    Args:
        message: Prompt shown to the user.
        minimum: Smallest accepted value.
        input_fn: Reads one line of user input.

    Returns:
        The entered integer.

    Raises:
        EOFError: If input ends before a valid value is entered.
    """
    while True:
        answer = input_fn(f"{message} ").strip()
        try:
            value = int(answer)
        except ValueError:
            print(f"'{answer}' is not a whole number.", file=sys.stderr)
            continue
        if value < minimum:
            print(f"Please enter a number of at least {minimum}.", file=sys.stderr)
            continue
        return value


def parse_args(args=None, input_fn: Callable[[str], str] = input) -> SimulationConfig:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv).
        input_fn: Used to prompt for width, height and interval when missing.

    Returns:
        SimulationConfig with parsed options.
    """
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Run Conway's Game of Life on a fixed-size grid.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-W", "--width",
        type=int,
        default=None,
        help="Grid width in cells (prompted for if omitted)",
    )

    parser.add_argument(
        "-H", "--height",
        type=int,
        default=None,
        help="Grid height in cells (prompted for if omitted)",
    )

    parser.add_argument(
        "-i", "--interval",
        type=int,
        default=None,
        help="Delay between generations in milliseconds (prompted for if omitted)",
    )

    parser.add_argument(
        "-g", "--generations",
        type=int,
        default=None,
        help="Stop after this many generations; required with --output",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the initial grid",
    )

    parser.add_argument(
        "--neighborhood",
        type=str,
        default="square",
        choices=sorted(NEIGHBORHOODS),
        help="Neighborhood shape used to count neighbors (default: square)",
    )

    parser.add_argument(
        "--extent",
        type=int,
        default=2,
        help="Neighborhood extent, counting the center cell (default: 2)",
    )

    parser.add_argument(
        "--alive-glyph",
        type=str,
        default=ALIVE_GLYPH,
        help=f"Character drawn for live cells (default: {ALIVE_GLYPH})",
    )

    parser.add_argument(
        "--dead-glyph",
        type=str,
        default=DEAD_GLYPH,
        help="Character drawn for dead cells (default: space)",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between generations",
    )

    # Headless output arguments
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Write generations to a video (.mp4, .avi) or the final grid to an image",
    )

    parser.add_argument(
        "--cell-size",
        type=int,
        default=8,
        help="Cell size in pixels for image and video output (default: 8)",
    )

    parser.add_argument(
        "--fps",
        type=int,
        default=10,
        help="Video frames per second (default: 10)",
    )

    parsed = parser.parse_args(args)

    if parsed.width is not None and parsed.width < 1:
        parser.error("--width must be a positive integer")
    if parsed.height is not None and parsed.height < 1:
        parser.error("--height must be a positive integer")
    if parsed.interval is not None and parsed.interval < 0:
        parser.error("--interval must not be negative")
    if parsed.generations is not None and parsed.generations < 0:
        parser.error("--generations must not be negative")
    if parsed.extent < 1:
        parser.error("--extent must be at least 1")
    if parsed.cell_size < 1:
        parser.error("--cell-size must be a positive integer")
    if parsed.fps < 1:
        parser.error("--fps must be a positive integer")
    if parsed.output is not None and parsed.generations is None:
        parser.error("--output requires --generations")

    width = parsed.width
    if width is None:
        width = prompt_for_int("Grid width:", minimum=1, input_fn=input_fn)
    height = parsed.height
    if height is None:
        height = prompt_for_int("Grid height:", minimum=1, input_fn=input_fn)
    interval = parsed.interval
    if interval is None:
        if parsed.output is not None:
            interval = 0
        else:
            interval = prompt_for_int(
                "Update interval in milliseconds:", minimum=0, input_fn=input_fn
            )

    return SimulationConfig.from_args(
        width=width,
        height=height,
        interval_ms=interval,
        seed=parsed.seed,
        neighborhood=parsed.neighborhood,
        extent=parsed.extent,
        alive_glyph=parsed.alive_glyph,
        dead_glyph=parsed.dead_glyph,
        cell_size=parsed.cell_size,
        clear_screen=not parsed.no_clear,
        output_path=parsed.output,
        generations=parsed.generations,
        fps=parsed.fps,
    )
