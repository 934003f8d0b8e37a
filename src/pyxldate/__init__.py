"""pyxldate - Convert between spreadsheet serial dates and datetimes."""

from __future__ import annotations

__version__ = "0.1.0"

import datetime

from pyxldate._converter import Converter, Serial
from pyxldate._errors import (
    BadDateWarning,
    ConversionError,
    InvalidInputError,
    OutOfRangeError,
)
from pyxldate._systems import SystemType, resolve_system_type
from pyxldate._timezones import TimezoneRef

__all__ = [
    "to_calendar",
    "to_number",
    "resolve_system_type",
    "Converter",
    "SystemType",
    "BadDateWarning",
    "ConversionError",
    "InvalidInputError",
    "OutOfRangeError",
]


def to_calendar(
    value: Serial,
    *,
    system_type: SystemType | str | int = SystemType.WINDOWS,
    tz: TimezoneRef = None,
) -> datetime.datetime:
    """Convert a spreadsheet serial number to a datetime.

    Args:
        value: The serial number.
        system_type: Date system of the serial. Defaults to the 1900
            (Windows) system.
        tz: Optional zone to attach to the result.

    Returns:
        The datetime, naive unless tz is given.

    Raises:
        InvalidInputError: If value is not numeric or tz is unknown.
        OutOfRangeError: If value is negative or too large.
    """
    return Converter(system_type)._to_calendar(value, tz, stacklevel=3)


def to_number(
    timestamp: datetime.date,
    *,
    system_type: SystemType | str | int = SystemType.WINDOWS,
) -> Serial | datetime.date:
    """Convert a date or datetime to a spreadsheet serial number.

    Args:
        timestamp: The date or datetime. Any time zone is ignored.
        system_type: Date system of the result. Defaults to the 1900
            (Windows) system.

    Returns:
        The serial number, or timestamp itself if it precedes the epoch.

    Raises:
        InvalidInputError: If timestamp is not a date or datetime.
    """
    return Converter(system_type).to_number(timestamp)
