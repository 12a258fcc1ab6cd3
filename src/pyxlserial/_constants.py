"""Calendar and unit constants for serial date conversion."""

SECONDS_PER_DAY = 86_400

MILLISECONDS_PER_DAY = SECONDS_PER_DAY * 1_000

MICROSECONDS_PER_DAY = SECONDS_PER_DAY * 1_000_000
"""Finest unit ``datetime.time`` can hold; time fractions are computed from it."""

FICTITIOUS_LEAP_DAY_SERIAL = 60
"""Serial of 1900-02-29 in the 1900 date system.

Lotus 1-2-3 treated 1900 as a leap year and Excel kept the bug so that
existing workbooks kept their dates. The day does not exist in the Gregorian
calendar but still occupies a serial number.
"""

FIRST_SHIFTED_SERIAL = FICTITIOUS_LEAP_DAY_SERIAL + 1
"""Serial of 1900-03-01, the first real date counted one day late."""

MAX_YEAR = 9999
"""Spreadsheet formats only hold four-digit years."""
