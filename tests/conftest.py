"""Shared test fixtures."""

import pytest

from pyxlserial.system.excel1900 import Excel1900DateSystem
from pyxlserial.system.excel1904 import Excel1904DateSystem


@pytest.fixture
def system_1900():
    return Excel1900DateSystem()


@pytest.fixture
def system_1904():
    return Excel1904DateSystem()
