"""Time zone attachment tests."""

import datetime
import zoneinfo

import pytest

from pyxldate._errors import BadDateWarning, InvalidInputError
from pyxldate._timezones import resolve_timezone


class TestResolveTimezone:
    def test_none_is_floating(self):
        assert resolve_timezone(None) is None

    def test_floating_name(self):
        assert resolve_timezone("floating") is None

    def test_tzinfo_passthrough(self):
        tz = datetime.timezone.utc
        assert resolve_timezone(tz) is tz

    def test_zone_name(self):
        assert resolve_timezone("Europe/Oslo") == zoneinfo.ZoneInfo("Europe/Oslo")

    def test_offset(self):
        tz = resolve_timezone(datetime.timedelta(hours=-5))
        assert tz.utcoffset(None) == datetime.timedelta(hours=-5)

    def test_unknown_zone(self):
        with pytest.raises(InvalidInputError) as exc_info:
            resolve_timezone("Not/A_Zone")
        assert "Not/A_Zone" in exc_info.value.internal()
        assert exc_info.value.wrapped is not None

    def test_offset_out_of_range(self):
        with pytest.raises(InvalidInputError):
            resolve_timezone(datetime.timedelta(hours=25))

    def test_unsupported_type(self):
        with pytest.raises(InvalidInputError):
            resolve_timezone(42)


class TestAttachZone:
    def test_clock_fields_not_shifted(self, windows_converter):
        result = windows_converter.to_calendar(40123.625, "America/New_York")
        assert result.hour == 15
        assert result.tzinfo == zoneinfo.ZoneInfo("America/New_York")

    def test_offset_attached(self, windows_converter):
        result = windows_converter.to_calendar(25569, datetime.timedelta(hours=2))
        assert result.utcoffset() == datetime.timedelta(hours=2)
        assert result.replace(tzinfo=None) == datetime.datetime(1970, 1, 1)

    def test_floating_by_default(self, windows_converter):
        assert windows_converter.to_calendar(25569).tzinfo is None

    def test_zone_on_substituted_date(self, windows_converter):
        with pytest.warns(BadDateWarning):
            result = windows_converter.to_calendar(0, datetime.timezone.utc)
        assert result == datetime.datetime(1900, 1, 1, tzinfo=datetime.timezone.utc)

    def test_bad_zone_fails_before_warning(self, windows_converter):
        with pytest.raises(InvalidInputError):
            windows_converter.to_calendar(0, "Not/A_Zone")
