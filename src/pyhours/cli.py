"""Command-line entry point: ``hours 1:30`` or ``hours 1.055``."""

from __future__ import annotations

import argparse
import logging
import sys

from pyhours import __version__
from pyhours._converter import convert
from pyhours._errors import HoursError, InvariantViolationError
from pyhours._time import DEFAULT_OVERFLOW_POLICY, OverflowPolicy

logger = logging.getLogger(__name__)

# BSD sysexits codes
EXIT_OK = 0
EXIT_DATAERR = 65
EXIT_SOFTWARE = 70

_EPILOG = """\
examples:
    hours 1:30    -> 0.0250   (minutes:seconds)
    hours 1:30:18 -> 1.5050
    hours 1.055   -> 1:03:18
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hours",
        description=(
            "Convert a duration from hours, minutes and seconds to a "
            "fraction of an hour, or vice versa."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "time",
        help="time in format hhh:mm:ss, mmm:ss or hhh.dddd",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug information to stderr",
    )
    parser.add_argument(
        "--overflow",
        choices=[policy.value for policy in OverflowPolicy],
        default=DEFAULT_OVERFLOW_POLICY.value,
        help="what to do when hours exceed 65535 (default: %(default)s)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = convert(args.time, overflow=OverflowPolicy(args.overflow))
    except InvariantViolationError as e:
        logger.error("%s", e.internal())
        return EXIT_SOFTWARE
    except HoursError as e:
        logger.debug("%s", e.internal())
        logger.error("%s", e)
        return EXIT_DATAERR

    print(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
