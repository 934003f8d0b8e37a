"""Core Converter class for spreadsheet serial <-> datetime conversion."""

from __future__ import annotations

import datetime
import logging
import math
import numbers
import warnings
from decimal import Decimal
from fractions import Fraction

from pyxldate._calendar import (
    add_days,
    julian_day,
    split_serial,
    time_to_day_fraction,
)
from pyxldate._constants import MAX_YEAR, PHANTOM_LEAP_SERIAL
from pyxldate._errors import (
    ERR_MSG_NEGATIVE,
    ERR_MSG_NOT_NUMERIC,
    ERR_MSG_NOT_TIMESTAMP,
    ERR_MSG_TOO_LARGE,
    BadDateWarning,
    InvalidInputError,
    OutOfRangeError,
)
from pyxldate._systems import (
    PHANTOM_LEAP_SUBSTITUTE,
    SystemType,
    epoch_for,
    resolve_system_type,
)
from pyxldate._timezones import TimezoneRef, resolve_timezone

logger = logging.getLogger(__name__)

Serial = int | float | Decimal | Fraction


def _validate_serial(value: object) -> None:
    """Reject anything that is not a non-negative, finite number."""
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidInputError(
            ERR_MSG_NOT_NUMERIC,
            f"expected a number, got {type(value).__name__}: {value!r}",
        )
    if math.isnan(value):
        raise InvalidInputError(ERR_MSG_NOT_NUMERIC, "serial value is NaN")
    if value < 0:
        raise OutOfRangeError(ERR_MSG_NEGATIVE, f"negative serial value {value!r}")
    if math.isinf(value):
        raise OutOfRangeError(ERR_MSG_TOO_LARGE, "serial value is infinite")


class Converter:
    """Converts between spreadsheet serial numbers and datetimes.

    A serial counts whole days since the epoch of the configured date
    system in its integer part and the elapsed fraction of a day in its
    fractional part.
    """

    def __init__(self, system_type: SystemType | str | int = SystemType.WINDOWS) -> None:
        self._system_type = resolve_system_type(system_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(system_type={self._system_type.value!r})"

    @property
    def system_type(self) -> SystemType:
        return self._system_type

    @system_type.setter
    def system_type(self, value: SystemType | str | int) -> None:
        self._system_type = resolve_system_type(value)

    def to_calendar(self, value: Serial, tz: TimezoneRef = None) -> datetime.datetime:
        """Convert a serial number to a datetime.

        Args:
            value: The serial number. Strings are never parsed.
            tz: Optional zone attached to the result: a tzinfo, an IANA zone
                name, a UTC offset timedelta, or None/"floating" for a naive
                result. The clock fields are not shifted into the zone.

        Returns:
            A new datetime with millisecond resolution.

        Raises:
            InvalidInputError: If value is not a number or tz cannot be resolved.
            OutOfRangeError: If value is negative or past year 9999.
        """
        return self._to_calendar(value, tz, stacklevel=3)

    def _to_calendar(
        self, value: Serial, tz: TimezoneRef, stacklevel: int
    ) -> datetime.datetime:
        # stacklevel is counted from this frame.
        _validate_serial(value)
        tzinfo = resolve_timezone(tz)
        system_type = self._system_type
        system = epoch_for(system_type)

        days, time_of_day = split_serial(value)

        if value == 0:
            warnings.warn(
                BadDateWarning(
                    f"bad date supplied: serial 0 is not a calendar date, "
                    f"using {system.zero_substitute.isoformat()}"
                ),
                stacklevel=stacklevel,
            )
            day = system.zero_substitute
        elif days == 0:
            day = system.time_only_date
        elif system.has_phantom_leap_day and days == PHANTOM_LEAP_SERIAL:
            warnings.warn(
                BadDateWarning(
                    f"fictitious leap day requested: serial {value!r} is 1900-02-29, "
                    f"using {PHANTOM_LEAP_SUBSTITUTE.isoformat()}"
                ),
                stacklevel=stacklevel,
            )
            day = PHANTOM_LEAP_SUBSTITUTE
        else:
            if system.has_phantom_leap_day and days > PHANTOM_LEAP_SERIAL:
                days -= 1
            year, month, mday = add_days(system.zero_reference, days)
            if year > MAX_YEAR:
                raise OutOfRangeError(
                    ERR_MSG_TOO_LARGE,
                    f"serial {value!r} resolves to year {year} ({system_type})",
                )
            day = datetime.date(year, month, mday)

        result = datetime.datetime.combine(day, datetime.time()) + time_of_day
        if tzinfo is not None:
            result = result.replace(tzinfo=tzinfo)
        return result

    def to_number(self, timestamp: datetime.date) -> Serial | datetime.date:
        """Convert a date or datetime to a serial number.

        Any time zone is ignored; the wall-clock fields are converted as-is.
        Timestamps earlier than the first day of the date system cannot be
        represented and are returned unchanged.

        Raises:
            InvalidInputError: If timestamp is not a date or datetime.
        """
        if not isinstance(timestamp, datetime.date):
            raise InvalidInputError(
                ERR_MSG_NOT_TIMESTAMP,
                f"expected a date or datetime, got {type(timestamp).__name__}",
            )
        system_type = self._system_type
        system = epoch_for(system_type)

        day_number = julian_day(timestamp)
        if day_number < julian_day(system.first_real_date):
            logger.debug(
                "%s precedes the %s epoch, returning it unchanged",
                timestamp.isoformat(),
                system_type,
            )
            return timestamp

        days = day_number - julian_day(system.zero_reference)
        if system.has_phantom_leap_day and days >= PHANTOM_LEAP_SERIAL:
            days += 1

        fraction = time_to_day_fraction(timestamp)
        if not fraction:
            return days
        return days + fraction
