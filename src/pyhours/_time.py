"""TimeValue type, carry normalization and decimal-hours conversion."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass

from lark import Tree

from pyhours._constants import (
    DECIMAL_PLACES,
    FRACTION_ROUNDING_DIGITS,
    MAX_COMPONENT_DIGITS,
    MAX_HOURS,
    MAX_MINUTES,
    MAX_SECONDS,
    MINUTES_PER_HOUR,
    OVERFLOW_COMPONENT,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from pyhours._errors import (
    ERR_MSG_DECIMAL_OUT_OF_RANGE,
    ERR_MSG_GRAMMAR_MISMATCH,
    ERR_MSG_INVALID_COMPONENT,
    ERR_MSG_NEGATIVE_DECIMAL,
    ERR_MSG_NO_DIGITS,
    InvalidComponentError,
    InvariantViolationError,
    ParseError,
)
from pyhours._grammar import Notation, classify, clock_groups, decimal_parts

logger = logging.getLogger(__name__)


class OverflowPolicy(enum.StrEnum):
    """What happens when carried hours exceed MAX_HOURS."""

    RESET = "reset"
    SATURATE = "saturate"


DEFAULT_OVERFLOW_POLICY = OverflowPolicy.RESET


def _check_component(name: str, value: int, upper: int | None = None) -> None:
    """Reject non-integer, negative or (when upper is given) too large values."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidComponentError(
            ERR_MSG_INVALID_COMPONENT,
            f"{name} must be an int, got {type(value).__name__}",
        )
    if value < 0:
        raise InvalidComponentError(
            ERR_MSG_INVALID_COMPONENT,
            f"{name} must not be negative, got {value}",
        )
    if upper is not None and value > upper:
        raise InvalidComponentError(
            ERR_MSG_INVALID_COMPONENT,
            f"{name} {value} exceeds limit {upper}",
        )


@dataclass(frozen=True)
class TimeValue:
    """A duration as hours, minutes and seconds.

    Fields are bounded by their storage width (hours 0-65535, minutes and
    seconds 0-255). Values built through normalize(), from_text() or
    from_decimal() always have minutes and seconds in 0-59.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        _check_component("hours", self.hours, MAX_HOURS)
        _check_component("minutes", self.minutes, MAX_MINUTES)
        _check_component("seconds", self.seconds, MAX_SECONDS)

    @classmethod
    def from_text(
        cls, text: str, *, overflow: OverflowPolicy | None = None
    ) -> TimeValue:
        """Parse clock or decimal notation, detecting which one text uses.

        Raises:
            ParseError: If text is in neither notation.
        """
        notation, tree = classify(text)
        if notation is Notation.CLOCK:
            return clock_from_tree(tree, text, overflow=overflow)
        return decimal_from_tree(tree, text, overflow=overflow)

    @classmethod
    def from_decimal(
        cls, value: float, *, overflow: OverflowPolicy | None = None
    ) -> TimeValue:
        """Convert decimal hours to a normalized TimeValue.

        Minutes and seconds come from successive multiplication of the
        residual fraction. Minutes are rounded to FRACTION_ROUNDING_DIGITS
        places before flooring so that 1.055 yields 3 minutes rather than
        2.99999...; seconds are rounded to the nearest integer and may
        carry into minutes.

        Minutes are deliberately not rounded to the nearest integer: 1.01
        has 0.6 residual minutes, and rounding that up to 1 would leave
        -24 seconds. Only the seconds are rounded.

        Raises:
            ParseError: If value is negative, infinite or NaN.
        """
        if not math.isfinite(value):
            raise ParseError(
                ERR_MSG_DECIMAL_OUT_OF_RANGE,
                f"decimal value {value!r} is not finite",
            )
        if value < 0:
            raise ParseError(
                ERR_MSG_NEGATIVE_DECIMAL,
                f"decimal value {value!r} is negative",
            )

        hours = math.floor(value)
        minutes_exact = (value - hours) * MINUTES_PER_HOUR
        minutes = math.floor(round(minutes_exact, FRACTION_ROUNDING_DIGITS))
        seconds = round((minutes_exact - minutes) * SECONDS_PER_MINUTE)
        return normalize(hours, minutes, seconds, overflow=overflow)

    def to_decimal(self) -> float:
        return (
            self.hours
            + self.minutes / MINUTES_PER_HOUR
            + self.seconds / SECONDS_PER_HOUR
        )

    def format_decimal(self) -> str:
        """Render as decimal hours with a fixed number of places, e.g. 1.2500."""
        return f"{self.to_decimal():.{DECIMAL_PLACES}f}"

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}"


def _bound_hours(
    hours: int, minutes: int, seconds: int, overflow: OverflowPolicy
) -> TimeValue:
    """Apply the overflow policy to already carried components."""
    if hours <= MAX_HOURS:
        return TimeValue(hours, minutes, seconds)
    if overflow is OverflowPolicy.SATURATE:
        logger.debug("hours %d exceed %d, saturating", hours, MAX_HOURS)
        return TimeValue(MAX_HOURS, minutes, seconds)
    logger.debug("hours %d exceed %d, resetting to zero", hours, MAX_HOURS)
    return TimeValue()


def normalize(
    hours: int,
    minutes: int,
    seconds: int,
    *,
    overflow: OverflowPolicy | None = None,
) -> TimeValue:
    """Carry seconds into minutes, then minutes into hours.

    Inputs may be arbitrarily large non-negative ints. When the carried
    hours exceed MAX_HOURS, the overflow policy decides the result:
    RESET (the default) returns 0:00:00, SATURATE pins hours to MAX_HOURS
    and keeps the normalized minutes and seconds.

    Raises:
        InvalidComponentError: If a component is negative or not an int.
    """
    _check_component("hours", hours)
    _check_component("minutes", minutes)
    _check_component("seconds", seconds)
    overflow = (
        DEFAULT_OVERFLOW_POLICY if overflow is None else OverflowPolicy(overflow)
    )

    minutes += seconds // SECONDS_PER_MINUTE
    seconds %= SECONDS_PER_MINUTE

    hours += minutes // MINUTES_PER_HOUR
    minutes %= MINUTES_PER_HOUR

    return _bound_hours(hours, minutes, seconds, overflow)


def _to_int(digits: str, text: str) -> int:
    """Convert a grammar-validated digit run; an empty run counts as 0.

    Runs longer than MAX_COMPONENT_DIGITS significant digits overflow
    hours wherever they appear, so they become OVERFLOW_COMPONENT
    without going through int().
    """
    significant = digits.lstrip("0")
    if not significant:
        return 0
    if len(significant) > MAX_COMPONENT_DIGITS:
        return OVERFLOW_COMPONENT
    try:
        return int(significant)
    except ValueError as e:
        raise InvariantViolationError(
            ERR_MSG_GRAMMAR_MISMATCH,
            f"digit run {digits!r} of {text!r} is not an int",
            wrapped=e,
        ) from e


def _to_float(literal: str, text: str) -> float:
    try:
        return float(literal)
    except ValueError as e:
        raise InvariantViolationError(
            ERR_MSG_GRAMMAR_MISMATCH,
            f"literal {literal!r} of {text!r} is not a float",
            wrapped=e,
        ) from e


def clock_from_tree(
    tree: Tree, text: str, *, overflow: OverflowPolicy | None = None
) -> TimeValue:
    """Build a normalized TimeValue from a clock-notation parse tree."""
    hours, minutes, seconds = (_to_int(g, text) for g in clock_groups(tree))
    return normalize(hours, minutes, seconds, overflow=overflow)


def decimal_from_tree(
    tree: Tree, text: str, *, overflow: OverflowPolicy | None = None
) -> TimeValue:
    """Build a normalized TimeValue from a decimal-notation parse tree.

    Raises:
        ParseError: If the input has neither integer nor fraction digits.
    """
    integer, fraction = decimal_parts(tree)
    if not integer and not fraction:
        raise ParseError(ERR_MSG_NO_DIGITS, f"input {text!r} has no digits")
    if len(integer.lstrip("0")) > MAX_COMPONENT_DIGITS:
        return normalize(OVERFLOW_COMPONENT, 0, 0, overflow=overflow)
    value = _to_float(f"{integer or '0'}.{fraction or '0'}", text)
    return TimeValue.from_decimal(value, overflow=overflow)
