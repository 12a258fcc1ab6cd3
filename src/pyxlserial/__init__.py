"""pyxlserial - Convert civil dates and times to spreadsheet serial dates."""

from __future__ import annotations

try:
    from pyxlserial._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import math
import numbers
from datetime import date, datetime, time
from typing import Any

from pyxlserial._errors import (
    ERR_MSG_NEGATIVE_SERIAL,
    ERR_MSG_NON_FINITE_SERIAL,
    ERR_MSG_TIME_ROUNDS_TO_NEXT_DAY,
    ERR_MSG_TIME_SERIAL_OUT_OF_RANGE,
    ERR_MSG_TIMEZONE_AWARE,
    ERR_MSG_UNSUPPORTED_TYPE,
    FictitiousLeapDayError,
    InvalidSerialError,
    RangeError,
    SerialDateError,
    UnsupportedTypeError,
)
from pyxlserial._fraction import TimeResolution, fraction_to_time, time_to_fraction
from pyxlserial.system import (
    DateSystem,
    DateSystemName,
    Excel1900DateSystem,
    Excel1904DateSystem,
    get_date_system,
)

__all__ = [
    "date_to_serial",
    "datetime_to_serial",
    "serial_to_date",
    "serial_to_datetime",
    "serial_to_time",
    "time_to_serial",
    "to_serial",
    "get_date_system",
    "DateSystem",
    "DateSystemName",
    "Excel1900DateSystem",
    "Excel1904DateSystem",
    "TimeResolution",
    "SerialDateError",
    "RangeError",
    "InvalidSerialError",
    "FictitiousLeapDayError",
    "UnsupportedTypeError",
]

_DEFAULT_SYSTEM = Excel1900DateSystem()


def _resolve_system(system: DateSystem | str | None) -> DateSystem:
    if system is None:
        return _DEFAULT_SYSTEM
    if isinstance(system, DateSystem):
        return system
    return get_date_system(system)


def _unsupported(value: Any, expected: str) -> UnsupportedTypeError:
    return UnsupportedTypeError(
        ERR_MSG_UNSUPPORTED_TYPE,
        f"expected {expected}, got {type(value).__name__}: {value!r}",
    )


def _check_naive(value: time | datetime) -> None:
    if value.tzinfo is not None:
        raise UnsupportedTypeError(
            ERR_MSG_TIMEZONE_AWARE,
            f"value {value.isoformat()} carries tzinfo {value.tzinfo!r}",
        )


def _check_serial(serial: Any) -> float:
    if isinstance(serial, bool) or not isinstance(serial, numbers.Real):
        raise _unsupported(serial, "a real number")
    try:
        serial = float(serial)
    except OverflowError as e:
        raise InvalidSerialError(
            ERR_MSG_NON_FINITE_SERIAL, f"serial number {serial!r} overflows a float", e
        ) from e
    if not math.isfinite(serial):
        raise InvalidSerialError(
            ERR_MSG_NON_FINITE_SERIAL, f"serial number is {serial!r}"
        )
    if serial < 0:
        raise InvalidSerialError(
            ERR_MSG_NEGATIVE_SERIAL, f"serial number {serial!r} is negative"
        )
    return serial


def date_to_serial(value: date, *, system: DateSystem | str | None = None) -> float:
    """Convert a civil date to a whole-number serial date.

    Args:
        value: The date to convert. ``datetime`` instances are rejected so a
            time of day is never dropped silently; use ``datetime_to_serial``.
        system: Date system or its name. Defaults to the 1900 date system.

    Returns:
        Days since the system epoch as a float with no fractional part.

    Raises:
        RangeError: If the date is outside the range of the date system.
        UnsupportedTypeError: If ``value`` is not a ``date``.
    """
    if isinstance(value, datetime) or not isinstance(value, date):
        raise _unsupported(value, "date")
    return float(_resolve_system(system).date_to_days(value))


def time_to_serial(value: time) -> float:
    """Convert a civil time to a fraction of a day in [0, 1).

    Raises:
        UnsupportedTypeError: If ``value`` is not a naive ``time``.
    """
    if not isinstance(value, time):
        raise _unsupported(value, "time")
    _check_naive(value)
    return time_to_fraction(value)


def datetime_to_serial(
    value: datetime, *, system: DateSystem | str | None = None
) -> float:
    """Convert a civil datetime to a serial date.

    The result is the serial of the date plus the time of day as a fraction,
    e.g. 2026-01-01 12:00 is 46023.5 in the 1900 date system.

    Args:
        value: A naive datetime.
        system: Date system or its name. Defaults to the 1900 date system.

    Raises:
        RangeError: If the date is outside the range of the date system.
        UnsupportedTypeError: If ``value`` is not a naive ``datetime``.
    """
    if not isinstance(value, datetime):
        raise _unsupported(value, "datetime")
    _check_naive(value)
    return date_to_serial(value.date(), system=system) + time_to_serial(value.time())


def to_serial(
    value: date | time | datetime, *, system: DateSystem | str | None = None
) -> float:
    """Convert any civil date, time or datetime to a serial date.

    Raises:
        RangeError: If a date is outside the range of the date system.
        UnsupportedTypeError: If ``value`` is not a naive date/time value.
    """
    if isinstance(value, datetime):
        return datetime_to_serial(value, system=system)
    if isinstance(value, date):
        return date_to_serial(value, system=system)
    if isinstance(value, time):
        return time_to_serial(value)
    raise _unsupported(value, "date, time or datetime")


def serial_to_datetime(
    serial: float,
    *,
    system: DateSystem | str | None = None,
    resolution: TimeResolution | str = TimeResolution.MICROSECOND,
) -> datetime:
    """Convert a serial date back to a civil datetime.

    The fractional part is rounded to the nearest ``resolution`` unit. A
    fraction that rounds up to a whole day becomes midnight of the next day.

    Args:
        serial: A non-negative, finite serial number.
        system: Date system or its name. Defaults to the 1900 date system.
        resolution: Unit to round the time of day to.

    Raises:
        InvalidSerialError: If the serial is negative or not finite.
        FictitiousLeapDayError: If the serial falls on 1900-02-29 (1900 system).
        RangeError: If the resulting date is past the end of the date system.
        UnsupportedTypeError: If ``serial`` is not a real number.
    """
    serial = _check_serial(serial)
    resolution = TimeResolution(resolution)
    date_system = _resolve_system(system)

    days = math.floor(serial)
    carry, time_of_day = fraction_to_time(serial - days, resolution)
    return datetime.combine(date_system.days_to_date(days + carry), time_of_day)


def serial_to_date(serial: float, *, system: DateSystem | str | None = None) -> date:
    """Convert a serial date back to a civil date, discarding the time of day.

    Raises:
        InvalidSerialError: If the serial is negative or not finite.
        FictitiousLeapDayError: If the serial falls on 1900-02-29 (1900 system).
        RangeError: If the resulting date is past the end of the date system.
        UnsupportedTypeError: If ``serial`` is not a real number.
    """
    return serial_to_datetime(serial, system=system).date()


def serial_to_time(
    serial: float, *, resolution: TimeResolution | str = TimeResolution.MICROSECOND
) -> time:
    """Convert a time-only serial in [0, 1) back to a civil time.

    Raises:
        InvalidSerialError: If the serial is negative, not finite, or rounds
            up to a whole day.
        RangeError: If the serial has an integer part.
        UnsupportedTypeError: If ``serial`` is not a real number.
    """
    serial = _check_serial(serial)
    resolution = TimeResolution(resolution)
    if serial >= 1.0:
        raise RangeError(
            ERR_MSG_TIME_SERIAL_OUT_OF_RANGE,
            f"time serial {serial!r} has an integer part",
        )

    carry, time_of_day = fraction_to_time(serial, resolution)
    if carry:
        raise InvalidSerialError(
            ERR_MSG_TIME_ROUNDS_TO_NEXT_DAY,
            f"time serial {serial!r} rounds to 24:00 at {resolution} resolution",
        )
    return time_of_day
