"""Spreadsheet date systems for serial date conversion."""

from pyxlserial.system._base import DateSystem, DateSystemName
from pyxlserial.system.excel1900 import Excel1900DateSystem
from pyxlserial.system.excel1904 import Excel1904DateSystem

__all__ = [
    "DateSystem",
    "DateSystemName",
    "Excel1900DateSystem",
    "Excel1904DateSystem",
    "get_date_system",
]

_REGISTRY: dict[str, type[DateSystem]] = {
    DateSystemName.EXCEL_1900: Excel1900DateSystem,
    DateSystemName.EXCEL_1904: Excel1904DateSystem,
}


def get_date_system(name: str) -> DateSystem:
    """Get a date system instance by name.

    Args:
        name: Date system name ("1900" or "1904").

    Returns:
        A DateSystem instance.

    Raises:
        ValueError: If the date system name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown date system: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()
