import copy
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import FrozenInstanceError

import pytest

from failchain.errors import FailchainError, InvalidCode, NotAnError


def test_failchain_error_str() -> None:
    err = FailchainError("msg", code="X", context={"foo": "bar"})
    assert str(err) == "msg"
    assert err.code == "X" and err.context == {"foo": "bar"}


def test_not_an_error_message_and_context() -> None:
    err = NotAnError(value=42)
    assert err.message == "Expected an exception or None, got int"
    assert err.code == "FAILCHAIN_NOT_AN_ERROR"
    assert err.context == {"value": "42"}
    assert isinstance(err, FailchainError)


def test_invalid_code_message_and_context() -> None:
    err = InvalidCode(value="A")
    assert err.message == "str does not implement error_code()"
    assert err.code == "FAILCHAIN_INVALID_CODE"
    assert err.context == {"value": "'A'"}


@contextmanager
def scope() -> Iterator[None]:
    yield


def test_misuse_errors_propagate_through_contextmanager() -> None:
    with pytest.raises(NotAnError) as excinfo:
        with scope():
            raise NotAnError(value=42)
    assert excinfo.value.code == "FAILCHAIN_NOT_AN_ERROR"


def test_misuse_errors_accept_notes_but_not_field_changes() -> None:
    err = InvalidCode(value="A")
    err.add_note("from settings")
    assert err.__notes__ == ["from settings"]
    with pytest.raises(FrozenInstanceError):
        err.message = "changed"  # type: ignore[misc]


def test_misuse_errors_can_be_copied() -> None:
    err = NotAnError(value=42)
    clone = copy.copy(err)
    assert clone is not err
    assert clone.message == err.message
    assert clone.context == {"value": "42"}
