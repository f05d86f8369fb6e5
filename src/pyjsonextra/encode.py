"""Encoders from domain values to JSON values.

Encoders return plain ``json``-serialisable Python values; ``encode`` turns
such a value into JSON text.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, TypeVar

from pyjsonextra import _iso8601
from pyjsonextra._constants import DEFAULT_ENCODE_INDENT
from pyjsonextra.values import CalendarDate, Timestamp, TimezoneBinding

__all__ = [
    "date",
    "encode",
    "optional",
    "timestamp_iso8601",
    "timestamp_seconds",
    "timezone",
]

T = TypeVar("T")


def timestamp_seconds(timestamp: Timestamp) -> float:
    return timestamp.seconds


def timestamp_iso8601(timestamp: Timestamp) -> str:
    return _iso8601.format_timestamp(timestamp.millis)


def timezone(binding: TimezoneBinding) -> str:
    return binding.name


def date(value: CalendarDate) -> str:
    return f"{value.year:04d}-{int(value.month):02d}-{value.day:02d}"


def optional(encoder: Callable[[T], Any], value: T | None) -> Any:
    """Encode ``value`` with ``encoder``, or JSON null when it is None."""
    if value is None:
        return None
    return encoder(value)


def encode(value: Any, indent: int = DEFAULT_ENCODE_INDENT) -> str:
    """Serialise a JSON value. ``indent=0`` gives compact output."""
    if indent:
        return json.dumps(value, indent=indent)
    return json.dumps(value, separators=(",", ":"))
