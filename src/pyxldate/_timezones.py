"""Resolution of the optional time zone attached to converted timestamps."""

from __future__ import annotations

import datetime
import zoneinfo

from pyxldate._errors import ERR_MSG_INVALID_TIMEZONE, InvalidInputError

FLOATING = "floating"

TimezoneRef = datetime.tzinfo | datetime.timedelta | str | None


def resolve_timezone(tz: TimezoneRef) -> datetime.tzinfo | None:
    """Turn a zone name, UTC offset or tzinfo into a tzinfo.

    ``None`` and ``"floating"`` yield ``None``, i.e. a naive timestamp.
    """
    if tz is None or tz == FLOATING:
        return None
    if isinstance(tz, datetime.tzinfo):
        return tz
    if isinstance(tz, datetime.timedelta):
        try:
            return datetime.timezone(tz)
        except ValueError as e:
            raise InvalidInputError(
                ERR_MSG_INVALID_TIMEZONE,
                f"UTC offset {tz!r} is out of range",
                wrapped=e,
            ) from e
    if isinstance(tz, str):
        try:
            return zoneinfo.ZoneInfo(tz)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise InvalidInputError(
                ERR_MSG_INVALID_TIMEZONE,
                f"time zone {tz!r} not found",
                wrapped=e,
            ) from e
    raise InvalidInputError(
        ERR_MSG_INVALID_TIMEZONE,
        f"unsupported time zone reference of type {type(tz).__name__}",
    )
