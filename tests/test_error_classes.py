"""Error class hierarchy tests."""

import pytest

from pyxlserial._errors import (
    FictitiousLeapDayError,
    InvalidSerialError,
    RangeError,
    SerialDateError,
    UnsupportedTypeError,
)


class TestSerialDateErrorBase:
    def test_str_returns_user_message(self):
        err = SerialDateError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = SerialDateError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = SerialDateError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = OverflowError("root cause")
        err = SerialDateError("user msg", wrapped=cause)
        assert err.wrapped is cause


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        RangeError,
        InvalidSerialError,
        FictitiousLeapDayError,
        UnsupportedTypeError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_serial_date_error(self, cls):
        assert issubclass(cls, SerialDateError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    def test_fictitious_leap_day_is_invalid_serial(self):
        assert issubclass(FictitiousLeapDayError, InvalidSerialError)

    def test_range_error_is_not_invalid_serial(self):
        assert not issubclass(RangeError, InvalidSerialError)
