"""Exception hierarchy for serial date conversion."""


class SerialDateError(Exception):
    """Base exception for serial date conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details, carrying the offending value, for host logging.
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


class RangeError(SerialDateError):
    """Raised when a date falls outside the range a date system can represent."""


class InvalidSerialError(SerialDateError):
    """Raised when a serial number cannot correspond to any date or time."""


class FictitiousLeapDayError(InvalidSerialError):
    """Raised for serial 60 in the 1900 system, which maps to 1900-02-29."""


class UnsupportedTypeError(SerialDateError):
    """Raised when a value is not a supported civil date/time type."""


# Sanitized user-facing error message constants
ERR_MSG_DATE_OUT_OF_RANGE = "date out of range for date system"
ERR_MSG_SERIAL_OUT_OF_RANGE = "serial number out of range for date system"
ERR_MSG_TIME_SERIAL_OUT_OF_RANGE = "time serial must be in [0, 1)"
ERR_MSG_NEGATIVE_SERIAL = "serial number cannot be negative"
ERR_MSG_NON_FINITE_SERIAL = "serial number must be finite"
ERR_MSG_FICTITIOUS_LEAP_DAY = "serial 60 is the fictitious 1900-02-29"
ERR_MSG_TIME_ROUNDS_TO_NEXT_DAY = "time serial rounds up to the next day"
ERR_MSG_UNSUPPORTED_TYPE = "unsupported type"
ERR_MSG_TIMEZONE_AWARE = "timezone-aware values are not supported"
