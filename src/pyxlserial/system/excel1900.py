"""1900 date system, the default for spreadsheets written on Windows."""

from __future__ import annotations

from datetime import date, timedelta

from pyxlserial._constants import (
    FICTITIOUS_LEAP_DAY_SERIAL,
    FIRST_SHIFTED_SERIAL,
    MAX_YEAR,
)
from pyxlserial._errors import ERR_MSG_FICTITIOUS_LEAP_DAY, FictitiousLeapDayError
from pyxlserial.system._base import DateSystem, DateSystemName

# First real date counted after the fictitious 1900-02-29.
_FIRST_SHIFTED_DATE = date(1900, 3, 1)


class Excel1900DateSystem(DateSystem):
    """Serial 0 is 1899-12-31 and 1900 is treated as a leap year.

    Serials 1 to 59 are 1900-01-01 to 1900-02-28, serial 60 is the
    non-existent 1900-02-29 and serial 61 onwards are real dates shifted
    by one day.
    """

    name = DateSystemName.EXCEL_1900
    epoch = date(1899, 12, 31)
    max_date = date(MAX_YEAR, 12, 31)

    def _days_from_epoch(self, value: date) -> int:
        days = (value - self.epoch).days
        if value >= _FIRST_SHIFTED_DATE:
            days += 1
        return days

    def _date_from_days(self, days: int) -> date:
        if days == FICTITIOUS_LEAP_DAY_SERIAL:
            raise FictitiousLeapDayError(
                ERR_MSG_FICTITIOUS_LEAP_DAY,
                f"serial day {days} has no Gregorian date (1900-02-29)",
            )
        if days >= FIRST_SHIFTED_SERIAL:
            days -= 1
        return self.epoch + timedelta(days=days)
