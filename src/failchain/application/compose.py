"""Building error chains.

Every entry point takes wrappers in the order they should read: the first one
ends up outermost. ``custom(err, Message("aaa"), Message("bbb"))`` is shown as
``"aaa: bbb: <err>"``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import overload

from failchain.domain.protocols import Code, Wrapper
from failchain.errors import NotAnError

from .wrappers import with_call_stack, with_code, without_code


def _apply(err: BaseException | None, wrappers: Iterable[Wrapper]) -> BaseException | None:
    for wrapper in reversed(list(wrappers)):
        err = wrapper.wrap_error(err)
    return err


def _require_error(err: object) -> None:
    if not isinstance(err, BaseException):
        raise NotAnError(value=err)


@overload
def custom(err: None, *wrappers: Wrapper) -> None: ...


@overload
def custom(err: BaseException, *wrappers: Wrapper) -> BaseException: ...


def custom(err: BaseException | None, *wrappers: Wrapper) -> BaseException | None:
    """Decorate *err* with *wrappers*. Wrapping ``None`` yields ``None``."""
    if err is None:
        return None
    _require_error(err)
    return _apply(err, wrappers)


def new(code: Code, *wrappers: Wrapper) -> BaseException:
    """Create a fresh error classified by *code*."""
    stack = with_call_stack(skip=1)
    return stack.wrap_error(_apply(None, (with_code(code), *wrappers)))


def translate(
    err: BaseException | None, code: Code, *wrappers: Wrapper
) -> BaseException | None:
    """Classify *err* with *code*, hiding any code it already carried."""
    if err is None:
        return None
    _require_error(err)
    return _apply(err, (with_call_stack(skip=1), with_code(code), *wrappers))


def wrap(err: BaseException | None, *wrappers: Wrapper) -> BaseException | None:
    """Record the current call site on *err*, keeping its code."""
    if err is None:
        return None
    _require_error(err)
    return _apply(err, (with_call_stack(skip=1), *wrappers))


def mark_unexpected(
    err: BaseException | None, *wrappers: Wrapper
) -> BaseException | None:
    """Wrap *err* so that no code below this point is reported."""
    if err is None:
        return None
    _require_error(err)
    return _apply(err, (with_call_stack(skip=1), without_code(), *wrappers))


def unexpected(message: str, *wrappers: Wrapper) -> BaseException:
    """Create an error for a failure that carries no code at all.

    *message* describes the failure for developers; it is not a user-facing
    :class:`~failchain.application.wrappers.Message`.
    """
    stack = with_call_stack(skip=1)
    return stack.wrap_error(_apply(Exception(message), wrappers))
