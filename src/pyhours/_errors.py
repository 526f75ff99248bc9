"""Exception hierarchy for time conversion."""


class HoursError(Exception):
    """Base exception for time conversion errors.

    Provides dual messaging: a short user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ParseError(HoursError):
    """Raised when input text cannot be parsed as a time value."""


class InvariantViolationError(HoursError):
    """Raised when text accepted by a grammar fails numeric conversion."""


class InvalidComponentError(HoursError):
    """Raised when a time component is outside its representable range."""


# User-facing error message constants
ERR_MSG_UNCLASSIFIED_INPUT = "could not classify input"
ERR_MSG_NOT_CLOCK = "input is not in clock notation"
ERR_MSG_NOT_DECIMAL = "input is not in decimal notation"
ERR_MSG_NO_DIGITS = "decimal input has no digits"
ERR_MSG_NEGATIVE_DECIMAL = "negative durations are not supported"
ERR_MSG_DECIMAL_OUT_OF_RANGE = "decimal value out of range"
ERR_MSG_INVALID_COMPONENT = "invalid time component"
ERR_MSG_GRAMMAR_MISMATCH = "internal error: accepted input failed numeric conversion"
