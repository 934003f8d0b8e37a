"""One-shot conversion function tests."""

import datetime

import pytest

import pyxldate
from pyxldate import BadDateWarning, InvalidInputError, OutOfRangeError, SystemType, to_calendar, to_number


class TestToCalendar:
    def test_defaults_to_windows(self):
        assert to_calendar(25569) == datetime.datetime(1970, 1, 1)

    def test_system_type(self):
        assert to_calendar(24107, system_type=SystemType.APPLE) == datetime.datetime(1970, 1, 1)

    def test_system_type_alias(self):
        assert to_calendar(24107, system_type="1904") == datetime.datetime(1970, 1, 1)

    def test_timezone(self):
        result = to_calendar(25569, tz="UTC")
        assert result.utcoffset() == datetime.timedelta(0)

    def test_warning(self):
        with pytest.warns(BadDateWarning):
            assert to_calendar(60) == datetime.datetime(1900, 3, 1)

    def test_warning_points_at_caller(self):
        with pytest.warns(BadDateWarning) as record:
            to_calendar(0)
        assert record[0].filename == __file__

    def test_string_rejected(self):
        with pytest.raises(InvalidInputError):
            to_calendar("2009-11-06")

    def test_negative_rejected(self):
        with pytest.raises(OutOfRangeError):
            to_calendar(-1)

    def test_unknown_system(self):
        with pytest.raises(ValueError):
            to_calendar(1, system_type="lotus")


class TestToNumber:
    def test_defaults_to_windows(self):
        assert to_number(datetime.datetime(1979, 7, 16)) == 29052

    def test_datemode(self):
        assert to_number(datetime.datetime(1979, 7, 16), system_type=1) == 27590

    def test_fallback(self):
        ts = datetime.datetime(1850, 1, 1)
        assert to_number(ts) is ts


class TestPublicApi:
    def test_version(self):
        assert pyxldate.__version__

    @pytest.mark.parametrize("name", pyxldate.__all__)
    def test_exports(self, name):
        assert hasattr(pyxldate, name)
