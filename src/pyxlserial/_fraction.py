"""Time-of-day <-> fraction-of-day arithmetic."""

from __future__ import annotations

import enum
from datetime import time

from pyxlserial._constants import MICROSECONDS_PER_DAY


class TimeResolution(enum.StrEnum):
    """Unit a serial fraction is rounded to when read back as a time."""

    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"

    @property
    def microseconds(self) -> int:
        return _MICROSECONDS_PER_UNIT[self]

    @property
    def units_per_day(self) -> int:
        return MICROSECONDS_PER_DAY // _MICROSECONDS_PER_UNIT[self]


_MICROSECONDS_PER_UNIT: dict[TimeResolution, int] = {
    TimeResolution.SECOND: 1_000_000,
    TimeResolution.MILLISECOND: 1_000,
    TimeResolution.MICROSECOND: 1,
}


def time_to_fraction(value: time) -> float:
    """Return the fraction of a day elapsed at ``value``, in [0, 1).

    Computed as a single division of whole microseconds so no rounding error
    accumulates across the hour/minute/second terms.
    """
    total_us = (
        (value.hour * 3600 + value.minute * 60 + value.second) * 1_000_000
        + value.microsecond
    )
    return total_us / MICROSECONDS_PER_DAY


def fraction_to_time(fraction: float, resolution: TimeResolution) -> tuple[int, time]:
    """Convert a fraction of a day to ``(carry_days, time)``.

    The fraction is rounded to the nearest ``resolution`` unit. When it rounds
    up to a whole day the result is midnight with ``carry_days == 1``.
    """
    units = round(fraction * resolution.units_per_day)
    carry, units = divmod(units, resolution.units_per_day)
    total_us = units * resolution.microseconds

    seconds, microsecond = divmod(total_us, 1_000_000)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return carry, time(hour, minute, second, microsecond)
