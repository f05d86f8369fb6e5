"""Value types produced by decoders and consumed by encoders."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import NamedTuple

from pyjsonextra._constants import EPOCH_ORDINAL, MILLIS_PER_DAY, MILLIS_PER_SECOND


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time as milliseconds since 1970-01-01T00:00:00Z."""

    millis: int

    @property
    def seconds(self) -> float:
        return self.millis / MILLIS_PER_SECOND

    @classmethod
    def from_datetime(cls, dt: datetime) -> Timestamp:
        """Build a timestamp from a datetime. Naive values are taken as UTC.

        Microseconds below the millisecond are dropped.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        utc = dt.astimezone(timezone.utc)
        days = utc.toordinal() - EPOCH_ORDINAL
        millis_of_day = (
            ((utc.hour * 60 + utc.minute) * 60 + utc.second) * MILLIS_PER_SECOND
            + utc.microsecond // 1000
        )
        return cls(days * MILLIS_PER_DAY + millis_of_day)

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime for this timestamp."""
        days, millis_of_day = divmod(self.millis, MILLIS_PER_DAY)
        day = datetime.fromordinal(EPOCH_ORDINAL + days).replace(tzinfo=timezone.utc)
        seconds, millis = divmod(millis_of_day, MILLIS_PER_SECOND)
        minutes, second = divmod(seconds, 60)
        hour, minute = divmod(minutes, 60)
        return day.replace(hour=hour, minute=minute, second=second, microsecond=millis * 1000)


class Month(enum.IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> Month | None:
        """Map 1..12 to a month, anything else to None."""
        try:
            return cls(number)
        except ValueError:
            return None


@dataclass(frozen=True)
class CalendarDate:
    """A calendar date. The day is not checked against the month."""

    year: int
    month: Month
    day: int


class TimezoneBinding(NamedTuple):
    """A canonical zone name with the zone object the registry holds for it."""

    name: str
    zone: tzinfo
