"""Julian day arithmetic and time-of-day helpers.

Day differences go through modified Julian day numbers from ``jdcal`` so
they are independent of time zone and of the proleptic Gregorian quirks of
any particular date type.
"""

from __future__ import annotations

import datetime

import jdcal

from pyxldate._constants import MILLISECONDS_PER_DAY, SECONDS_PER_DAY


def julian_day(day: datetime.date) -> int:
    """Return the modified Julian day number of a calendar date."""
    _, mjd = jdcal.gcal2jd(day.year, day.month, day.day)
    return int(mjd)


def from_julian_day(mjd: int) -> tuple[int, int, int]:
    """Return the Gregorian ``(year, month, day)`` of a modified Julian day."""
    year, month, day, _ = jdcal.jd2gcal(jdcal.MJD_0, mjd)
    return year, month, day


def add_days(day: datetime.date, days: int) -> tuple[int, int, int]:
    return from_julian_day(julian_day(day) + days)


def split_serial(value) -> tuple[int, datetime.timedelta]:
    """Split a serial into whole days and a time of day.

    The serial is rounded to the millisecond before it is split, so a time
    that rounds up to midnight counts towards the next day number.
    """
    days, milliseconds = divmod(round(value * MILLISECONDS_PER_DAY), MILLISECONDS_PER_DAY)
    return days, datetime.timedelta(milliseconds=milliseconds)


def seconds_since_midnight(ts: datetime.date) -> float:
    if not isinstance(ts, datetime.datetime):
        return 0.0
    return (
        ts.hour * 3600
        + ts.minute * 60
        + ts.second
        + ts.microsecond / 10**6
    )


def time_to_day_fraction(ts: datetime.date) -> float:
    return seconds_since_midnight(ts) / SECONDS_PER_DAY
