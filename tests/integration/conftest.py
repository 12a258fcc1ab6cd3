"""Fixtures for cross-checks against openpyxl."""

from __future__ import annotations

from io import BytesIO

import pytest

from pyxlserial import to_serial


@pytest.fixture
def openpyxl():
    return pytest.importorskip("openpyxl")


@pytest.fixture
def roundtrip_workbook(openpyxl):
    """Write serials for some values to a workbook and read the cells back.

    openpyxl turns numeric cells carrying a date format back into Python
    values using the workbook's epoch, so the result is what a spreadsheet
    reader sees for the serials this library produced.
    """
    from openpyxl.utils.datetime import CALENDAR_MAC_1904, CALENDAR_WINDOWS_1900

    epochs = {"1900": CALENDAR_WINDOWS_1900, "1904": CALENDAR_MAC_1904}

    def _roundtrip(values, system: str, number_format: str) -> list:
        wb = openpyxl.Workbook()
        wb.epoch = epochs[system]
        ws = wb.active
        for row, value in enumerate(values, start=1):
            cell = ws.cell(row=row, column=1, value=to_serial(value, system=system))
            cell.number_format = number_format

        buf = BytesIO()
        wb.save(buf)
        buf.seek(0)

        sheet = openpyxl.load_workbook(buf).active
        return [sheet.cell(row=row, column=1).value for row in range(1, len(values) + 1)]

    return _roundtrip
