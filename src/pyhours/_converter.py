"""Directed parsing of clock/decimal text and the conversion entry points."""

from __future__ import annotations

import logging

from pyhours._errors import ERR_MSG_NOT_CLOCK, ERR_MSG_NOT_DECIMAL, ParseError
from pyhours._grammar import Notation, classify
from pyhours._time import (
    OverflowPolicy,
    TimeValue,
    clock_from_tree,
    decimal_from_tree,
)

logger = logging.getLogger(__name__)


def parse_clock(text: str, *, overflow: OverflowPolicy | None = None) -> TimeValue:
    """Parse H:MM:SS or MM:SS text into a normalized TimeValue.

    Raises:
        ParseError: If text is not in clock notation.
    """
    notation, tree = classify(text)
    if notation is not Notation.CLOCK:
        raise ParseError(ERR_MSG_NOT_CLOCK, f"input {text!r} is {notation} notation")
    return clock_from_tree(tree, text, overflow=overflow)


def parse_decimal(
    text: str, *, overflow: OverflowPolicy | None = None
) -> TimeValue:
    """Parse decimal-hours text ("1.5", "1,5", "1.", ".5") into a TimeValue.

    Raises:
        ParseError: If text is not in decimal notation or has no digits.
    """
    notation, tree = classify(text)
    if notation is not Notation.DECIMAL:
        raise ParseError(ERR_MSG_NOT_DECIMAL, f"input {text!r} is {notation} notation")
    return decimal_from_tree(tree, text, overflow=overflow)


def convert_time_to_decimal(
    text: str, *, overflow: OverflowPolicy | None = None
) -> str:
    """Convert clock notation to decimal hours, e.g. "1:15:00" -> "1.2500".

    Args:
        text: H:MM:SS or MM:SS. A single colon means minutes:seconds.
        overflow: Hour overflow policy. Defaults to OverflowPolicy.RESET.

    Returns:
        Decimal hours with four fractional digits.

    Raises:
        ParseError: If text is not in clock notation.
    """
    time = parse_clock(text, overflow=overflow)
    logger.debug("%r parsed as %r", text, time)
    return time.format_decimal()


def convert_decimal_to_time(
    text: str, *, overflow: OverflowPolicy | None = None
) -> str:
    """Convert decimal hours to clock notation, e.g. "1.055" -> "1:03:18".

    Args:
        text: Decimal hours with "." or "," as separator.
        overflow: Hour overflow policy. Defaults to OverflowPolicy.RESET.

    Returns:
        H:MM:SS with zero-padded minutes and seconds.

    Raises:
        ParseError: If text is not in decimal notation.
    """
    time = parse_decimal(text, overflow=overflow)
    logger.debug("%r parsed as %r", text, time)
    return str(time)


def convert(text: str, *, overflow: OverflowPolicy | None = None) -> str:
    """Convert text in either direction, detecting its notation.

    Clock notation becomes decimal hours and decimal hours become clock
    notation.

    Raises:
        ParseError: If text is in neither notation.
    """
    notation, tree = classify(text)
    if notation is Notation.CLOCK:
        time = clock_from_tree(tree, text, overflow=overflow)
        logger.debug("%r parsed as %r", text, time)
        return time.format_decimal()
    time = decimal_from_tree(tree, text, overflow=overflow)
    logger.debug("%r parsed as %r", text, time)
    return str(time)
