"""Abstract base class for spreadsheet date systems."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from datetime import date

from pyxlserial._errors import (
    ERR_MSG_DATE_OUT_OF_RANGE,
    ERR_MSG_SERIAL_OUT_OF_RANGE,
    RangeError,
)


class DateSystemName(enum.StrEnum):
    EXCEL_1900 = "1900"
    EXCEL_1904 = "1904"


class DateSystem(ABC):
    """Abstract base class defining the epoch arithmetic of a date system.

    A date system maps civil dates to whole day counts ("serial days") and
    back. Range checks are shared here; subclasses only supply the epoch
    and the mapping itself.
    """

    name: DateSystemName
    epoch: date
    max_date: date = date.max

    @property
    def min_date(self) -> date:
        return self.epoch

    @property
    def max_serial(self) -> int:
        return self.date_to_days(self.max_date)

    @abstractmethod
    def _days_from_epoch(self, value: date) -> int: ...

    @abstractmethod
    def _date_from_days(self, days: int) -> date: ...

    def date_to_days(self, value: date) -> int:
        """Return the serial day of ``value``.

        Raises:
            RangeError: If ``value`` is outside [min_date, max_date].
        """
        if not self.min_date <= value <= self.max_date:
            raise RangeError(
                ERR_MSG_DATE_OUT_OF_RANGE,
                f"date {value.isoformat()} outside {self.min_date.isoformat()}"
                f"..{self.max_date.isoformat()} for the {self.name} date system",
            )
        return self._days_from_epoch(value)

    def days_to_date(self, days: int) -> date:
        """Return the civil date of serial day ``days``.

        Raises:
            RangeError: If ``days`` is outside [0, max_serial].
        """
        if not 0 <= days <= self.max_serial:
            raise RangeError(
                ERR_MSG_SERIAL_OUT_OF_RANGE,
                f"serial day {days} outside 0..{self.max_serial} "
                f"for the {self.name} date system",
            )
        return self._date_from_days(days)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
