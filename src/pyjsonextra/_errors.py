"""Exception hierarchy for JSON decoding."""

from __future__ import annotations


class DecodeError(Exception):
    """Base exception for decode failures.

    Provides dual messaging: a user-facing message and internal details
    for logging. ``path`` records where in the input the failure happened,
    outermost key first.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped
        self.path: list[str | int] = []

    def internal(self) -> str:
        return self.internal_details

    def location(self) -> str:
        """Render ``path`` as a JSONPath-like string, e.g. ``$.events[2].at``."""
        parts = ["$"]
        for key in self.path:
            if isinstance(key, int):
                parts.append(f"[{key}]")
            else:
                parts.append(f".{key}")
        return "".join(parts)


class TypeMismatchError(DecodeError):
    """Raised when a JSON value does not have the expected shape."""


class MalformedJSONError(DecodeError):
    """Raised when input text is not valid JSON."""


class UnknownTimezoneError(DecodeError):
    """Raised when a timezone name is not in the registry."""


class InvalidDateError(DecodeError):
    """Raised when a string is not a YYYY-MM-DD date."""


class InvalidTimestampError(DecodeError):
    """Raised when a string is not an ISO-8601 timestamp."""


class CustomDecodeError(DecodeError):
    """Raised by ``fail`` decoders."""


class OneOfError(DecodeError):
    """Raised when every alternative of a ``one_of`` decoder fails."""

    def __init__(self, errors: list[DecodeError]) -> None:
        details = "; ".join(f"{e.location()}: {e.internal()}" for e in errors)
        super().__init__(
            ERR_MSG_ONE_OF_FAILED,
            f"all {len(errors)} alternatives failed: {details}",
        )
        self.errors = errors


# User-facing error message templates
ERR_MSG_EXPECTING = "Expecting {expected}"
ERR_MSG_MALFORMED_JSON = "This is not valid JSON"
ERR_MSG_UNKNOWN_TIMEZONE = 'Unknown timezone "{name}"'
ERR_MSG_UNKNOWN_DATE = "Unknown date value: {value}"
ERR_MSG_INVALID_TIMESTAMP = "Expecting an ISO-8601 formatted date+time string"
ERR_MSG_TIMESTAMP_OUT_OF_RANGE = "Expecting a timestamp between years 1 and 9999"
ERR_MSG_ONE_OF_FAILED = "None of the alternatives matched"
