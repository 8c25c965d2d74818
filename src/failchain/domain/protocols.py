"""Capabilities recognised while walking an error chain."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import CallStack


@runtime_checkable
class Code(Protocol):
    """Classify an error with a stable string identifier."""

    def error_code(self) -> str:  # pragma: no cover - protocol definition
        """Return the identifier of the code."""
        ...


@runtime_checkable
class Unwrapper(Protocol):
    def unwrap(self) -> BaseException | None: ...


@runtime_checkable
class CodeCarrier(Protocol):
    def get_code(self) -> Code: ...


@runtime_checkable
class InfoCarrier(Protocol):
    def get_info(self) -> Mapping[str, Any]: ...


@runtime_checkable
class CallStackCarrier(Protocol):
    def get_call_stack(self) -> CallStack: ...


@runtime_checkable
class MessageCarrier(Protocol):
    def get_message(self) -> str: ...


class Wrapper(Protocol):
    """Decorate an error with one more attribute."""

    def wrap_error(self, err: BaseException | None) -> BaseException:
        """Return a new error whose underlying error is *err*."""
        ...
