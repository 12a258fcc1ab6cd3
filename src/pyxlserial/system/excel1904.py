"""1904 date system, used by workbooks created on early Macintosh Excel."""

from __future__ import annotations

from datetime import date, timedelta

from pyxlserial._constants import MAX_YEAR
from pyxlserial.system._base import DateSystem, DateSystemName


class Excel1904DateSystem(DateSystem):
    """Serial 0 is 1904-01-01; plain Gregorian day counting."""

    name = DateSystemName.EXCEL_1904
    epoch = date(1904, 1, 1)
    max_date = date(MAX_YEAR, 12, 31)

    def _days_from_epoch(self, value: date) -> int:
        return (value - self.epoch).days

    def _date_from_days(self, days: int) -> date:
        return self.epoch + timedelta(days=days)
