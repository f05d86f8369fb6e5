"""Constants for timestamp, date and JSON conversion."""

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR

EPOCH_ORDINAL = 719163
"""``datetime.date(1970, 1, 1).toordinal()``."""

DATE_SEPARATOR = "-"

YEAR_WIDTH = 4
"""Characters kept from the right of the year segment of a date string."""

MONTH_WIDTH = 2
DAY_WIDTH = 2

DEFAULT_ENCODE_INDENT = 0
"""Compact output for ``encode``."""

MIN_MILLIS = -62135596800000
"""0001-01-01T00:00:00.000Z, the earliest instant ``YYYY`` can format."""

MAX_MILLIS = 253402300799999
"""9999-12-31T23:59:59.999Z, the latest instant ``YYYY`` can format."""
