"""Attach codes, messages, info and call stacks to exceptions.

Build chains with :func:`new`, :func:`translate`, :func:`wrap`,
:func:`mark_unexpected`, :func:`unexpected` or :func:`custom`, and read them back
with :func:`code_of`, :func:`is_`, :func:`message_of`, :func:`info_list_of`,
:func:`call_stack_of` and :func:`cause_of`.
"""

from __future__ import annotations

from failchain.application.accessors import (
    call_stack_of,
    cause_of,
    code_of,
    code_or_unknown,
    info_list_of,
    is_,
    message_of,
)
from failchain.application.compose import (
    custom,
    mark_unexpected,
    new,
    translate,
    unexpected,
    wrap,
)
from failchain.application.wrappers import (
    Info,
    Message,
    WrapperFunc,
    with_call_stack,
    with_code,
    without_code,
)
from failchain.config import Settings, get_settings
from failchain.domain.chain import ChainIterator, iterate
from failchain.domain.code import UNKNOWN, StringCode
from failchain.domain.models import CallStack, Frame
from failchain.domain.nodes import (
    CodedNode,
    InfoNode,
    MessageNode,
    Node,
    StackNode,
    SuppressedCodeNode,
)
from failchain.domain.protocols import Code, Wrapper
from failchain.errors import FailchainError, InvalidCode, NotAnError
from failchain.infrastructure.error_utils import log_failure, wrap_exceptions
from failchain.infrastructure.formatting import format_error

__all__ = [
    "UNKNOWN",
    "CallStack",
    "ChainIterator",
    "Code",
    "CodedNode",
    "FailchainError",
    "Frame",
    "Info",
    "InfoNode",
    "InvalidCode",
    "Message",
    "MessageNode",
    "Node",
    "NotAnError",
    "Settings",
    "StackNode",
    "StringCode",
    "SuppressedCodeNode",
    "Wrapper",
    "WrapperFunc",
    "call_stack_of",
    "cause_of",
    "code_of",
    "code_or_unknown",
    "custom",
    "format_error",
    "get_settings",
    "info_list_of",
    "is_",
    "iterate",
    "log_failure",
    "mark_unexpected",
    "message_of",
    "new",
    "translate",
    "unexpected",
    "with_call_stack",
    "with_code",
    "without_code",
    "wrap",
    "wrap_exceptions",
]
