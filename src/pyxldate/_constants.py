"""Numeric constants for spreadsheet serial conversion."""

SECONDS_PER_DAY = 86400

MILLISECONDS_PER_DAY = SECONDS_PER_DAY * 1000
"""Time-of-day is resolved to the millisecond, the resolution spreadsheets store."""

PHANTOM_LEAP_SERIAL = 60
"""Serial of the non-existent 1900-02-29 in the 1900 date system."""

MAX_YEAR = 9999
"""Last calendar year a serial may resolve to."""
