"""ISO-8601 timestamp strings to and from epoch milliseconds.

Accepted shapes::

    2019-11-22
    2019-11-22T18:26
    2019-11-22T18:26:45
    2019-11-22T18:26:45.394Z
    2019-11-22T18:26:45.394+05:30   (also +0530, +05, and - offsets)

A missing time is midnight, a missing offset is UTC. Fractions finer than a
millisecond are truncated. Output is always ``YYYY-MM-DDTHH:MM:SS.sssZ``.
"""

from __future__ import annotations

import logging
from datetime import date, time

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from pyjsonextra._constants import (
    EPOCH_ORDINAL,
    MAX_MILLIS,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MIN_MILLIS,
)
from pyjsonextra._errors import ERR_MSG_INVALID_TIMESTAMP, InvalidTimestampError

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
start: date ("T" clock offset?)?

date: digits4 "-" digits2 "-" digits2
clock: digits2 ":" digits2 (":" digits2 fraction?)?
fraction: "." DIGIT+

offset: "Z"                         -> utc
      | "+" digits2 (":"? digits2)? -> east
      | "-" digits2 (":"? digits2)? -> west

digits4: DIGIT DIGIT DIGIT DIGIT
digits2: DIGIT DIGIT

DIGIT: "0".."9"
"""

_parser = Lark(_GRAMMAR, parser="lalr")


class _Fields(Transformer):
    """Collapse the parse tree into plain integers."""

    def digits4(self, tokens: list[Token]) -> int:
        return int("".join(tokens))

    digits2 = digits4

    def fraction(self, tokens: list[Token]) -> int:
        digits = "".join(tokens)[:3]
        return int(digits.ljust(3, "0"))

    def date(self, items: list[int]) -> tuple[int, int, int]:
        year, month, day = items
        return year, month, day

    def clock(self, items: list[int]) -> tuple[int, int, int, int]:
        hour, minute, second, millis = (items + [0, 0])[:4]
        return hour, minute, second, millis

    def utc(self, _: list[int]) -> tuple[int, int]:
        return 0, 0

    def east(self, items: list[int]) -> tuple[int, int]:
        hours, minutes = (items + [0])[:2]
        return hours, minutes

    def west(self, items: list[int]) -> tuple[int, int]:
        hours, minutes = self.east(items)
        return -hours, -minutes

    def start(self, items: list[tuple[int, ...]]) -> list[tuple[int, ...]]:
        return items


def _fields_to_millis(
    ymd: tuple[int, int, int],
    clock: tuple[int, int, int, int],
    offset: tuple[int, int],
) -> int:
    # date() and time() raise ValueError for out-of-range fields.
    day = date(*ymd)
    hour, minute, second, millis = clock
    time(hour, minute, second)
    offset_hours, offset_minutes = offset
    if abs(offset_hours) > 23 or abs(offset_minutes) > 59:
        raise ValueError(f"offset out of range: {offset_hours:+03d}:{abs(offset_minutes):02d}")

    instant = (
        (day.toordinal() - EPOCH_ORDINAL) * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millis
        - offset_hours * MILLIS_PER_HOUR
        - offset_minutes * MILLIS_PER_MINUTE
    )
    if not MIN_MILLIS <= instant <= MAX_MILLIS:
        raise ValueError(f"offset moves {instant} outside years 1..9999")
    return instant


def parse_timestamp(text: str) -> int:
    """Parse an ISO-8601 timestamp into milliseconds since the epoch.

    Raises:
        InvalidTimestampError: If ``text`` is malformed or names an
            impossible date, time or offset.
    """
    try:
        parts = _Fields().transform(_parser.parse(text))
        ymd = parts[0]
        clock = parts[1] if len(parts) > 1 else (0, 0, 0, 0)
        offset = parts[2] if len(parts) > 2 else (0, 0)
        return _fields_to_millis(ymd, clock, offset)
    except (LarkError, ValueError) as exc:
        logger.debug("rejected ISO-8601 timestamp %r: %s", text, exc)
        raise InvalidTimestampError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"cannot parse {text!r} as ISO-8601: {exc}",
            wrapped=exc,
        ) from exc


def format_timestamp(millis: int) -> str:
    """Format milliseconds since the epoch as ``YYYY-MM-DDTHH:MM:SS.sssZ`` in UTC.

    Raises:
        ValueError: If the instant falls outside years 1..9999.
    """
    days, millis_of_day = divmod(millis, MILLIS_PER_DAY)
    try:
        day = date.fromordinal(EPOCH_ORDINAL + days)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"timestamp {millis} is outside years 1..9999") from exc
    hour, rest = divmod(millis_of_day, MILLIS_PER_HOUR)
    minute, rest = divmod(rest, MILLIS_PER_MINUTE)
    second, fraction = divmod(rest, MILLIS_PER_SECOND)
    return (
        f"{day.year:04d}-{day.month:02d}-{day.day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}.{fraction:03d}Z"
    )
