"""Decoders for timestamps, calendar dates and timezones.

Each name here is a ``Decoder``: call it on a JSON value, or compose it with
``field``, ``list_of`` and the other combinators.

    >>> from pyjsonextra import decode, decode_string, field
    >>> decode_string(field("at", decode.timestamp_seconds), '{"at": 1574447205.5}')
    Timestamp(millis=1574447205500)
"""

from __future__ import annotations

import math
import re
from typing import Any

from pyjsonextra import _iso8601
from pyjsonextra._constants import (
    DATE_SEPARATOR,
    DAY_WIDTH,
    MAX_MILLIS,
    MILLIS_PER_SECOND,
    MIN_MILLIS,
    MONTH_WIDTH,
    YEAR_WIDTH,
)
from pyjsonextra._decoder import Decoder, number, string
from pyjsonextra._errors import (
    ERR_MSG_TIMESTAMP_OUT_OF_RANGE,
    ERR_MSG_UNKNOWN_DATE,
    ERR_MSG_UNKNOWN_TIMEZONE,
    InvalidDateError,
    InvalidTimestampError,
    UnknownTimezoneError,
)
from pyjsonextra.timezones import TimezoneRegistry, default_registry
from pyjsonextra.values import CalendarDate, Month, Timestamp, TimezoneBinding

__all__ = [
    "date",
    "ignore",
    "parse_date",
    "timestamp_iso8601",
    "timestamp_seconds",
    "timezone",
    "timezone_in",
]

INT_RE = re.compile(r"^[+-]?[0-9]+$")


def _ignore(_: Any) -> None:
    return None


ignore: Decoder[None] = Decoder(_ignore, "anything")
"""Accept any value and discard it."""


def _from_seconds(seconds: int | float) -> Timestamp:
    millis = seconds * MILLIS_PER_SECOND
    # NaN fails both comparisons; infinities and huge ints fail one.
    if not MIN_MILLIS - 1 < millis < MAX_MILLIS + 1:
        raise InvalidTimestampError(
            ERR_MSG_TIMESTAMP_OUT_OF_RANGE,
            f"{seconds!r} seconds is outside [{MIN_MILLIS}, {MAX_MILLIS}] millis",
        )
    return Timestamp(math.trunc(millis))


timestamp_seconds: Decoder[Timestamp] = number.map(_from_seconds)
"""Seconds since the epoch as a JSON number, within years 1..9999.

Sub-millisecond digits are truncated.
"""


timestamp_iso8601: Decoder[Timestamp] = string.map(
    lambda text: Timestamp(_iso8601.parse_timestamp(text))
)
"""An ISO-8601 string such as ``"2019-11-22T18:26:45.394Z"``."""


def timezone_in(registry: TimezoneRegistry | None = None) -> Decoder[TimezoneBinding]:
    """Decode a zone name against ``registry`` (the IANA registry by default)."""

    def lookup(name: str) -> TimezoneBinding:
        zones = registry if registry is not None else default_registry()
        zone = zones.find(name)
        if zone is None:
            raise UnknownTimezoneError(
                ERR_MSG_UNKNOWN_TIMEZONE.format(name=name),
                f"{name!r} is not among {len(zones)} registered zones",
            )
        return TimezoneBinding(name, zone)

    return string.map(lookup)


timezone: Decoder[TimezoneBinding] = timezone_in()
"""An IANA zone name such as ``"America/Los_Angeles"``."""


def _to_int(segment: str) -> int | None:
    if not INT_RE.match(segment):
        return None
    return int(segment)


def parse_date(text: str) -> CalendarDate:
    """Parse ``YYYY-MM-DD``, keeping only the rightmost digits of each segment.

    Raises:
        InvalidDateError: If there are not exactly three segments, a segment
            is not an integer, or the month is outside 1..12.
    """
    segments = text.split(DATE_SEPARATOR)
    if len(segments) != 3:
        raise InvalidDateError(
            ERR_MSG_UNKNOWN_DATE.format(value=text),
            f"expected 3 {DATE_SEPARATOR!r}-separated segments, got {len(segments)}",
        )

    year_part, month_part, day_part = segments
    year = _to_int(year_part[-YEAR_WIDTH:])
    month_number = _to_int(month_part[-MONTH_WIDTH:])
    day = _to_int(day_part[-DAY_WIDTH:])
    month = Month.from_number(month_number) if month_number is not None else None
    if year is None or month is None or day is None:
        raise InvalidDateError(
            ERR_MSG_UNKNOWN_DATE.format(value=text),
            f"bad date fields in {text!r}: year={year} month={month_number} day={day}",
        )
    return CalendarDate(year, month, day)


date: Decoder[CalendarDate] = string.map(parse_date)
"""A ``YYYY-MM-DD`` string."""
