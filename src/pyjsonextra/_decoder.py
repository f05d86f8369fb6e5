"""Decoder composition primitive over JSON values.

A ``Decoder`` wraps a function from a JSON value (as produced by
``json.loads``) to a Python value. Decoders compose with ``field``,
``list_of``, ``one_of``, ``map_n`` and friends; the first failure raises a
``DecodeError`` and short-circuits the enclosing decoder.
"""

from __future__ import annotations

import json
import logging
import reprlib
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from pyjsonextra._errors import (
    ERR_MSG_EXPECTING,
    ERR_MSG_MALFORMED_JSON,
    CustomDecodeError,
    DecodeError,
    MalformedJSONError,
    OneOfError,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Decoder(Generic[T]):
    """A composable conversion from a JSON value to ``T``."""

    __slots__ = ("_fn", "description")

    def __init__(self, fn: Callable[[Any], T], description: str = "a value") -> None:
        self._fn = fn
        self.description = description

    def __call__(self, value: Any) -> T:
        return self._fn(value)

    def decode(self, value: Any) -> T:
        return self._fn(value)

    def map(self, func: Callable[[T], U]) -> Decoder[U]:
        return Decoder(lambda value: func(self._fn(value)), self.description)

    def and_then(self, func: Callable[[T], Decoder[U]]) -> Decoder[U]:
        """Pick the next decoder from this one's result and run it on the same value."""
        return Decoder(lambda value: func(self._fn(value))(value), self.description)

    def __repr__(self) -> str:
        return f"Decoder({self.description})"


def expecting(expected: str, value: Any) -> TypeMismatchError:
    """Build the type-mismatch error for ``value`` not being ``expected``."""
    return TypeMismatchError(
        ERR_MSG_EXPECTING.format(expected=expected),
        f"expected {expected}, got {type(value).__name__}: {reprlib.repr(value)}",
    )


@contextmanager
def _located(key: str | int) -> Iterator[None]:
    try:
        yield
    except DecodeError as err:
        err.path.insert(0, key)
        raise


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ---- Primitives ----


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise expecting("a STRING", value)
    return value


def _number(value: Any) -> int | float:
    if not _is_number(value):
        raise expecting("a NUMBER", value)
    return value


def _integer(value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int) or isinstance(value, bool):
        raise expecting("an INT", value)
    return value


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise expecting("a BOOL", value)
    return value


string: Decoder[str] = Decoder(_string, "a STRING")
number: Decoder[int | float] = Decoder(_number, "a NUMBER")
integer: Decoder[int] = Decoder(_integer, "an INT")
boolean: Decoder[bool] = Decoder(_boolean, "a BOOL")
value: Decoder[Any] = Decoder(lambda v: v, "a value")


def null(default: T) -> Decoder[T]:
    """Succeed with ``default`` when the value is JSON null."""

    def run(value: Any) -> T:
        if value is not None:
            raise expecting("null", value)
        return default

    return Decoder(run, "null")


def succeed(result: T) -> Decoder[T]:
    return Decoder(lambda _: result, "anything")


def fail(message: str) -> Decoder[Any]:
    def run(value: Any) -> Any:
        raise CustomDecodeError(message, f"{message} (value: {reprlib.repr(value)})")

    return Decoder(run, "nothing")


# ---- Structure ----


def field(name: str, decoder: Decoder[T]) -> Decoder[T]:
    """Decode the field ``name`` of a JSON object."""
    expected = f"an OBJECT with a field named `{name}`"

    def run(value: Any) -> T:
        if not isinstance(value, dict) or name not in value:
            raise expecting(expected, value)
        with _located(name):
            return decoder(value[name])

    return Decoder(run, expected)


def at(path: Sequence[str], decoder: Decoder[T]) -> Decoder[T]:
    """Decode a nested field, e.g. ``at(["user", "tz"], timezone)``."""
    for name in reversed(path):
        decoder = field(name, decoder)
    return decoder


def index(position: int, decoder: Decoder[T]) -> Decoder[T]:
    def run(value: Any) -> T:
        if not isinstance(value, list):
            raise expecting("an ARRAY", value)
        if not 0 <= position < len(value):
            raise expecting(f"a LONGER array. Need index {position}", value)
        with _located(position):
            return decoder(value[position])

    return Decoder(run, "an ARRAY")


def list_of(decoder: Decoder[T]) -> Decoder[list[T]]:
    def run(value: Any) -> list[T]:
        if not isinstance(value, list):
            raise expecting("a LIST", value)
        result = []
        for position, item in enumerate(value):
            with _located(position):
                result.append(decoder(item))
        return result

    return Decoder(run, "a LIST")


def dict_of(decoder: Decoder[T]) -> Decoder[dict[str, T]]:
    def run(value: Any) -> dict[str, T]:
        if not isinstance(value, dict):
            raise expecting("an OBJECT", value)
        result = {}
        for key, item in value.items():
            with _located(key):
                result[key] = decoder(item)
        return result

    return Decoder(run, "an OBJECT")


# ---- Control ----


def nullable(decoder: Decoder[T]) -> Decoder[T | None]:
    """Decode JSON null as None, anything else with ``decoder``."""

    def run(value: Any) -> T | None:
        if value is None:
            return None
        return decoder(value)

    return Decoder(run, f"null or {decoder.description}")


def one_of(*decoders: Decoder[Any]) -> Decoder[Any]:
    """Try each decoder in order and return the first success."""

    def run(value: Any) -> Any:
        errors: list[DecodeError] = []
        for decoder in decoders:
            try:
                return decoder(value)
            except DecodeError as err:
                logger.debug("one_of alternative %r failed: %s", decoder, err.internal())
                errors.append(err)
        raise OneOfError(errors)

    return Decoder(run, " or ".join(d.description for d in decoders) or "nothing")


def map_n(func: Callable[..., T], *decoders: Decoder[Any]) -> Decoder[T]:
    """Run every decoder on the same value and combine the results with ``func``."""
    return Decoder(lambda value: func(*[d(value) for d in decoders]), "an OBJECT")


# ---- Entry points ----


def decode_value(decoder: Decoder[T], value: Any) -> T:
    """Run ``decoder`` on an already-parsed JSON value.

    Raises:
        DecodeError: If the value does not decode.
    """
    try:
        return decoder(value)
    except DecodeError as err:
        logger.debug("decode failed at %s: %s", err.location(), err.internal())
        raise


def _reject_constant(name: str) -> Any:
    raise json.JSONDecodeError(f"{name} is not a JSON value", name, 0)


def decode_string(decoder: Decoder[T], text: str | bytes) -> T:
    """Parse JSON text and run ``decoder`` on the result.

    ``NaN`` and ``Infinity`` are not JSON and are rejected.

    Raises:
        MalformedJSONError: If ``text`` is not valid JSON or not decodable bytes.
        DecodeError: If the parsed value does not decode.
    """
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.debug("malformed JSON input: %s", exc)
        raise MalformedJSONError(ERR_MSG_MALFORMED_JSON, str(exc), wrapped=exc) from exc
    return decode_value(decoder, parsed)
