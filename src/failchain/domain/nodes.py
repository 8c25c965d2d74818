"""Chain nodes: each one decorates an underlying error with one attribute."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import override

from failchain.errors import ReadOnlyFieldsError

from .chain import iterate
from .models import CallStack, InfoMapping
from .protocols import Code


@dataclass(kw_only=True, eq=False)
class Node(ReadOnlyFieldsError):
    """Base of every failchain node.

    Attributes:
        underlying: The decorated error, or ``None`` for a chain root.
    """

    underlying: BaseException | None = None

    def unwrap(self) -> BaseException | None:
        return self.underlying

    @override
    def __str__(self) -> str:
        return render(self)


@dataclass(kw_only=True, eq=False)
class CodedNode(Node):
    code: Code

    def get_code(self) -> Code:
        return self.code


@dataclass(kw_only=True, eq=False)
class InfoNode(Node):
    info: InfoMapping = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    def get_info(self) -> InfoMapping:
        return self.info


@dataclass(kw_only=True, eq=False)
class StackNode(Node):
    call_stack: CallStack

    def get_call_stack(self) -> CallStack:
        return self.call_stack


@dataclass(kw_only=True, eq=False)
class MessageNode(Node):
    message: str

    def get_message(self) -> str:
        return self.message


@dataclass(kw_only=True, eq=False)
class SuppressedCodeNode(Node):
    """Hides every code below it from code lookups."""


def render(err: BaseException) -> str:
    """Build the one-line description of *err* and everything it wraps.

    A stack node contributes the function it was captured in, and a code right
    below it is shown in parentheses after that name. Messages are shown as they
    are. The first error that is not a failchain node ends the description with
    its own ``str()``.
    """
    parts: list[str] = []
    head_open = False
    for current in iterate(err):
        match current:
            case StackNode(call_stack=stack):
                frame = stack.head_frame()
                if frame is None:
                    continue
                parts.append(frame.function)
                head_open = True
            case CodedNode(code=code):
                ident = code.error_code()
                if ident and head_open:
                    parts[-1] = f"{parts[-1]}({ident})"
                elif ident:
                    parts.append(ident)
                head_open = False
            case MessageNode(message=message):
                if message:
                    parts.append(message)
                head_open = False
            case Node():
                continue
            case _:
                text = str(current)
                if text:
                    parts.append(text)
                break
    return ": ".join(parts)
