"""Reading attributes back out of an error chain."""

from __future__ import annotations

from failchain.config import get_settings
from failchain.domain.chain import ChainIterator, unwrap_once
from failchain.domain.code import UNKNOWN, same_code
from failchain.domain.models import CallStack, InfoMapping
from failchain.domain.nodes import Node, SuppressedCodeNode
from failchain.domain.protocols import (
    CallStackCarrier,
    Code,
    CodeCarrier,
    InfoCarrier,
    MessageCarrier,
)
from failchain.infrastructure.callstack import from_traceback


def code_of(err: BaseException | None) -> Code | None:
    """Return the outermost code of *err*, or ``None`` if it has none.

    Lookup stops at a node created by ``without_code()``/``mark_unexpected()``.
    """
    it = ChainIterator(err)
    while it.next():
        if it.as_(SuppressedCodeNode) is not None:
            return None
        carrier = it.as_(CodeCarrier)
        if carrier is not None:
            return carrier.get_code()
    return None


def code_or_unknown(err: BaseException | None) -> Code:
    code = code_of(err)
    return UNKNOWN if code is None else code


def is_(err: BaseException | None, *codes: Code | None) -> bool:
    """Return ``True`` if the code of *err* is one of *codes*.

    ``None`` among *codes* matches an error without a code, and ``None`` itself.
    """
    code = code_of(err)
    return any(same_code(code, candidate) for candidate in codes)


def message_of(err: BaseException | None, default: str | None = None) -> str:
    """Return the outermost non-empty message of *err*.

    Falls back to *default*, then to ``Settings.default_message``.
    """
    for current in ChainIterator(err):
        if isinstance(current, MessageCarrier):
            message = current.get_message()
            if message:
                return message
    if default is not None:
        return default
    return get_settings().default_message


def info_list_of(err: BaseException | None) -> list[InfoMapping]:
    """Return every info mapping of *err*, outermost first."""
    return [
        current.get_info()
        for current in ChainIterator(err)
        if isinstance(current, InfoCarrier)
    ]


def call_stack_of(err: BaseException | None) -> CallStack | None:
    """Return the call stack captured closest to where *err* originated.

    Foreign exceptions that were raised contribute their traceback.
    """
    deepest: CallStack | None = None
    for current in ChainIterator(err):
        if isinstance(current, CallStackCarrier):
            stack = current.get_call_stack()
        elif not isinstance(current, Node) and current.__traceback__ is not None:
            stack = from_traceback(current.__traceback__)
        else:
            continue
        if stack:
            deepest = stack
    return deepest


def cause_of(err: BaseException | None) -> BaseException | None:
    """Return the root cause of *err*.

    Nodes are followed through ``unwrap()``. Other errors are followed through a
    ``cause()`` method when they have one, otherwise through ``__cause__``.
    """
    if err is None:
        return None
    seen = {id(err)}
    while True:
        if isinstance(err, Node):
            cause = err.unwrap()
        elif callable(getattr(err, "cause", None)):
            cause = err.cause()  # type: ignore[attr-defined]
        else:
            cause = unwrap_once(err)
        if not isinstance(cause, BaseException) or id(cause) in seen:
            return err
        seen.add(id(cause))
        err = cause
