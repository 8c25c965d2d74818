"""Stock wrappers, each adding one node on top of an error."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from failchain.domain.models import CallStack
from failchain.domain.nodes import (
    CodedNode,
    InfoNode,
    MessageNode,
    StackNode,
    SuppressedCodeNode,
)
from failchain.domain.protocols import Code, Wrapper
from failchain.errors import InvalidCode
from failchain.infrastructure.callstack import capture


class Info(dict[str, Any]):
    """Key/value context explaining why the error occurred."""

    def wrap_error(self, err: BaseException | None) -> BaseException:
        return InfoNode(info=self, underlying=err)


class Message(str):
    """Human-readable message meant for the user of the application."""

    __slots__ = ()

    def wrap_error(self, err: BaseException | None) -> BaseException:
        return MessageNode(message=str(self), underlying=err)


@dataclass(frozen=True, slots=True)
class WrapperFunc:
    """Adapt a plain callable to the wrapper protocol."""

    func: Callable[[BaseException | None], BaseException]

    def wrap_error(self, err: BaseException | None) -> BaseException:
        return self.func(err)


@dataclass(frozen=True, slots=True)
class WithCode:
    code: Code

    def wrap_error(self, err: BaseException | None) -> BaseException:
        return CodedNode(code=self.code, underlying=err)


@dataclass(frozen=True, slots=True)
class WithCallStack:
    call_stack: CallStack

    def wrap_error(self, err: BaseException | None) -> BaseException:
        return StackNode(call_stack=self.call_stack, underlying=err)


@dataclass(frozen=True, slots=True)
class WithoutCode:
    def wrap_error(self, err: BaseException | None) -> BaseException:
        return SuppressedCodeNode(underlying=err)


def with_code(code: Code) -> Wrapper:
    if not isinstance(code, Code):
        raise InvalidCode(value=code)
    return WithCode(code)


def with_call_stack(skip: int = 0, depth: int | None = None) -> Wrapper:
    """Capture the stack of the caller now and attach it when wrapping.

    *skip* drops that many more frames, so a helper can hide itself.
    """
    return WithCallStack(capture(skip + 1, depth))


def without_code() -> Wrapper:
    return WithoutCode()
