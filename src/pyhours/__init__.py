"""pyhours - Convert between clock-style durations and decimal hours."""

from __future__ import annotations

__version__ = "0.1.0"

from pyhours._converter import (
    convert,
    convert_decimal_to_time,
    convert_time_to_decimal,
)
from pyhours._errors import (
    HoursError,
    InvalidComponentError,
    InvariantViolationError,
    ParseError,
)
from pyhours._grammar import Notation, detect_notation
from pyhours._time import OverflowPolicy, TimeValue, normalize

__all__ = [
    "convert",
    "convert_decimal_to_time",
    "convert_time_to_decimal",
    "detect_notation",
    "normalize",
    "Notation",
    "OverflowPolicy",
    "TimeValue",
    "HoursError",
    "InvalidComponentError",
    "InvariantViolationError",
    "ParseError",
]
