"""Numeric limits and formatting constants for time conversion."""

MAX_HOURS = 65535
"""Largest representable hour count (16-bit unsigned)."""

MAX_MINUTES = 255
"""Storage bound for the minutes field; normalized values stay below 60."""

MAX_SECONDS = 255
"""Storage bound for the seconds field; normalized values stay below 60."""

MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = MINUTES_PER_HOUR * SECONDS_PER_MINUTE

DECIMAL_PLACES = 4
"""Fixed number of fractional digits in decimal-hours output."""

FRACTION_ROUNDING_DIGITS = 9
"""Digits kept when stripping binary noise from fractional minutes."""

MAX_COMPONENT_DIGITS = 12
"""Significant digits above which a digit run overflows MAX_HOURS in any field."""

OVERFLOW_COMPONENT = (MAX_HOURS + 1) * SECONDS_PER_HOUR
"""Stand-in for digit runs too long to convert; overflows hours in any field."""
