"""Lark grammars for clock and decimal notation, and notation detection.

Both parsers are built once at import time. Detection tries the clock
grammar first and falls back to the decimal grammar; the first grammar that
accepts the whole input wins.
"""

from __future__ import annotations

import enum
import logging

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from pyhours._errors import ERR_MSG_UNCLASSIFIED_INPUT, ParseError

logger = logging.getLogger(__name__)


class Notation(enum.StrEnum):
    CLOCK = "clock"
    DECIMAL = "decimal"


# H:MM:SS and MM:SS, told apart by the number of colons.
CLOCK_GRAMMAR = r"""
?start: hms
      | ms

hms: [DIGITS] ":" [DIGITS] ":" [DIGITS]
ms: [DIGITS] ":" [DIGITS]

DIGITS: /[0-9]+/
"""

# Hours with an optional fraction; "," and "." are both accepted separators.
DECIMAL_GRAMMAR = r"""
start: [DIGITS] [fraction]
fraction: SEPARATOR [DIGITS]

DIGITS: /[0-9]+/
SEPARATOR: /[.,]/
"""

_clock_parser = Lark(CLOCK_GRAMMAR, parser="lalr", maybe_placeholders=True)
_decimal_parser = Lark(DECIMAL_GRAMMAR, parser="lalr", maybe_placeholders=True)

_PARSERS: tuple[tuple[Notation, Lark], ...] = (
    (Notation.CLOCK, _clock_parser),
    (Notation.DECIMAL, _decimal_parser),
)


def classify(text: str) -> tuple[Notation, Tree]:
    """Classify text and return its notation together with the parse tree.

    Raises:
        ParseError: If neither grammar accepts the whole input.
    """
    for notation, parser in _PARSERS:
        try:
            tree = parser.parse(text)
        except UnexpectedInput as e:
            logger.debug("%s grammar rejected %r: %s", notation, text, e)
            continue
        return notation, tree
    raise ParseError(
        ERR_MSG_UNCLASSIFIED_INPUT,
        f"input {text!r} matches neither clock nor decimal notation",
    )


def detect_notation(text: str) -> Notation:
    """Return the notation of text, or raise ParseError if it has none."""
    notation, _ = classify(text)
    return notation


def _digits(token: Token | None) -> str:
    return "" if token is None else str(token)


def clock_groups(tree: Tree) -> tuple[str, str, str]:
    """Return the raw (hours, minutes, seconds) digit runs of a clock parse.

    A single-colon input is minutes:seconds, so its hours group is empty.
    Missing groups come back as empty strings.
    """
    groups = [_digits(token) for token in tree.children]
    if tree.data == "ms":
        minutes, seconds = groups
        return "", minutes, seconds
    hours, minutes, seconds = groups
    return hours, minutes, seconds


def decimal_parts(tree: Tree) -> tuple[str, str]:
    """Return the raw (integer, fraction) digit runs of a decimal parse.

    The separator itself is dropped, which is how "," becomes ".".
    """
    integer, fraction = tree.children
    fraction_digits = ""
    if isinstance(fraction, Tree):
        _separator, digits = fraction.children
        fraction_digits = _digits(digits)
    return _digits(integer), fraction_digits
