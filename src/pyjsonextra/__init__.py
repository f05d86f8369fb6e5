"""pyjsonextra - JSON decoders and encoders for timestamps, dates and timezones."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyjsonextra")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pyjsonextra import decode, encode
from pyjsonextra._decoder import (
    Decoder,
    at,
    boolean,
    decode_string,
    decode_value,
    dict_of,
    fail,
    field,
    index,
    integer,
    list_of,
    map_n,
    null,
    nullable,
    number,
    one_of,
    string,
    succeed,
    value,
)
from pyjsonextra._errors import (
    CustomDecodeError,
    DecodeError,
    InvalidDateError,
    InvalidTimestampError,
    MalformedJSONError,
    OneOfError,
    TypeMismatchError,
    UnknownTimezoneError,
)
from pyjsonextra.timezones import TimezoneRegistry, default_registry
from pyjsonextra.values import CalendarDate, Month, Timestamp, TimezoneBinding

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "decode",
    "encode",
    "Decoder",
    "at",
    "boolean",
    "decode_string",
    "decode_value",
    "dict_of",
    "fail",
    "field",
    "index",
    "integer",
    "list_of",
    "map_n",
    "null",
    "nullable",
    "number",
    "one_of",
    "string",
    "succeed",
    "value",
    "CalendarDate",
    "Month",
    "Timestamp",
    "TimezoneBinding",
    "TimezoneRegistry",
    "default_registry",
    "CustomDecodeError",
    "DecodeError",
    "InvalidDateError",
    "InvalidTimestampError",
    "MalformedJSONError",
    "OneOfError",
    "TypeMismatchError",
    "UnknownTimezoneError",
]
