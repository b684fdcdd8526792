"""Command-line interface for howto."""

import argparse
import logging
import sys

from howto import __version__
from howto.config import debug_enabled
from howto.errors import HowtoError
from howto.howto import run


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="howto",
        description="Get a CLI command for a high-level action",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "action",
        metavar="ACTION",
        help="The high-level action you would like to get a CLI command for",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        command = run(args.action)
    except HowtoError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(command)
    return 0


def entrypoint() -> None:
    raise SystemExit(main())
