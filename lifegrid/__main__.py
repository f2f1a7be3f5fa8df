"""Entry point for python -m lifegrid."""

import sys

from .cli import parse_args
from .core.errors import GridError
from .runners.headless import run_headless
from .runners.terminal import run_terminal


def main(args=None):
    """Main entry point."""
    try:
        config = parse_args(args)
    except EOFError:
        print("\nNo input received, exiting.", file=sys.stderr)
        sys.exit(1)

    try:
        if config.headless:
            run_headless(config)
        else:
            run_terminal(config)
    except GridError as error:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
