"""Value type tests."""

from datetime import datetime, timedelta, timezone

import pytest

from pyjsonextra.values import CalendarDate, Month, Timestamp

SAMPLE_MILLIS = 1574447205394  # 2019-11-22T18:26:45.394Z


class TestTimestamp:
    def test_seconds(self):
        assert Timestamp(1500).seconds == 1.5

    def test_to_datetime(self):
        assert Timestamp(SAMPLE_MILLIS).to_datetime() == datetime(
            2019, 11, 22, 18, 26, 45, 394000, tzinfo=timezone.utc
        )

    def test_to_datetime_before_epoch(self):
        assert Timestamp(-1).to_datetime() == datetime(
            1969, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc
        )

    def test_from_aware_datetime(self):
        dt = datetime(2019, 11, 22, 13, 26, 45, 394000, tzinfo=timezone(timedelta(hours=-5)))
        assert Timestamp.from_datetime(dt) == Timestamp(SAMPLE_MILLIS)

    def test_from_naive_datetime_is_utc(self):
        assert Timestamp.from_datetime(datetime(1970, 1, 1, 0, 0, 1)) == Timestamp(1000)

    def test_from_datetime_drops_microseconds(self):
        assert Timestamp.from_datetime(datetime(1970, 1, 1, microsecond=1999)) == Timestamp(1)

    def test_ordering(self):
        assert Timestamp(1) < Timestamp(2)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Timestamp(1).millis = 2


class TestMonth:
    def test_from_number(self):
        assert Month.from_number(1) is Month.JANUARY
        assert Month.from_number(12) is Month.DECEMBER

    @pytest.mark.parametrize("number", [0, 13, -1])
    def test_out_of_range(self, number):
        assert Month.from_number(number) is None


class TestCalendarDate:
    def test_equality(self):
        assert CalendarDate(2019, Month.NOVEMBER, 22) == CalendarDate(2019, Month(11), 22)
