"""Error class hierarchy tests."""

import pytest

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


class TestDecodeErrorBase:
    def test_str_returns_user_message(self):
        err = DecodeError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = DecodeError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = DecodeError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = DecodeError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_exception(self):
        err = DecodeError("test")
        assert isinstance(err, Exception)

    def test_empty_path_location(self):
        assert DecodeError("test").location() == "$"

    def test_location_renders_keys_and_indexes(self):
        err = DecodeError("test")
        err.path = ["events", 2, "at"]
        assert err.location() == "$.events[2].at"


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        TypeMismatchError,
        MalformedJSONError,
        UnknownTimezoneError,
        InvalidDateError,
        InvalidTimestampError,
        CustomDecodeError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_decode_error(self, cls):
        assert issubclass(cls, DecodeError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"


class TestOneOfError:
    def test_collects_child_errors(self):
        children = [TypeMismatchError("a"), InvalidDateError("b")]
        err = OneOfError(children)
        assert err.errors == children
        assert isinstance(err, DecodeError)

    def test_internal_lists_each_child(self):
        err = OneOfError([TypeMismatchError("a", "first"), InvalidDateError("b", "second")])
        assert "first" in err.internal()
        assert "second" in err.internal()
        assert "2 alternatives" in err.internal()
