"""Spreadsheet date systems and their epoch definitions."""

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass


class SystemType(enum.StrEnum):
    WINDOWS = "win_excel"
    APPLE = "apple_excel"


@dataclass(frozen=True)
class EpochSystem:
    """Calendar anchors of one spreadsheet date system.

    Attributes:
        zero_reference: Date whose serial number is 0. For the 1900 system
            this stands in for the non-existent 1900-01-00.
        zero_substitute: Date returned when exactly 0 is converted.
        time_only_date: Date attached to serials in ``(0, 1)``.
        first_real_date: Earliest date that converts to a serial.
        has_phantom_leap_day: Whether serial 60 is the fictitious 1900-02-29.
    """

    zero_reference: datetime.date
    zero_substitute: datetime.date
    time_only_date: datetime.date
    first_real_date: datetime.date
    has_phantom_leap_day: bool


_EPOCHS: dict[SystemType, EpochSystem] = {
    SystemType.WINDOWS: EpochSystem(
        zero_reference=datetime.date(1899, 12, 31),
        zero_substitute=datetime.date(1900, 1, 1),
        time_only_date=datetime.date(1900, 1, 1),
        first_real_date=datetime.date(1900, 1, 1),
        has_phantom_leap_day=True,
    ),
    SystemType.APPLE: EpochSystem(
        zero_reference=datetime.date(1904, 1, 1),
        zero_substitute=datetime.date(1904, 1, 2),
        time_only_date=datetime.date(1904, 1, 1),
        first_real_date=datetime.date(1904, 1, 1),
        has_phantom_leap_day=False,
    ),
}

PHANTOM_LEAP_SUBSTITUTE = datetime.date(1900, 3, 1)

_ALIASES: dict[str, SystemType] = {
    "win_excel": SystemType.WINDOWS,
    "windows": SystemType.WINDOWS,
    "win": SystemType.WINDOWS,
    "1900": SystemType.WINDOWS,
    "apple_excel": SystemType.APPLE,
    "apple": SystemType.APPLE,
    "mac": SystemType.APPLE,
    "1904": SystemType.APPLE,
}

# Workbook datemode flag as stored in .xls/.xlsx files
_DATEMODES: dict[int, SystemType] = {
    0: SystemType.WINDOWS,
    1: SystemType.APPLE,
}


def epoch_for(system_type: SystemType) -> EpochSystem:
    return _EPOCHS[system_type]


def resolve_system_type(value: SystemType | str | int) -> SystemType:
    """Resolve a system type from an enum member, name or workbook datemode.

    Args:
        value: A SystemType, a name such as "win_excel", "apple", "1904",
            or a datemode integer (0 for the 1900 system, 1 for 1904).

    Returns:
        The matching SystemType.

    Raises:
        ValueError: If the value names no known date system.
    """
    if isinstance(value, SystemType):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        system_type = _DATEMODES.get(value)
    elif isinstance(value, str):
        system_type = _ALIASES.get(value.strip().lower())
    else:
        system_type = None
    if system_type is None:
        raise ValueError(
            f"unknown system type: {value!r}. "
            f"Available: {', '.join(sorted(_ALIASES))} or datemode 0/1"
        )
    return system_type
