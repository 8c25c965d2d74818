from __future__ import annotations

import inspect
import traceback
from types import FrameType, TracebackType

from failchain.config import get_settings
from failchain.domain.models import CallStack, Frame


def _frame_of(frame: FrameType, line: int | None = None) -> Frame:
    code = frame.f_code
    return Frame(
        function=code.co_qualname,
        module=frame.f_globals.get("__name__", ""),
        file=code.co_filename,
        line=(frame.f_lineno or 0) if line is None else line,
    )


def capture(skip: int = 0, depth: int | None = None) -> CallStack:
    """Capture the stack of the caller, innermost frame first.

    *skip* drops that many frames above the caller; *depth* caps the number of
    frames kept and defaults to ``Settings.call_stack_depth``.
    """
    if depth is None:
        depth = get_settings().call_stack_depth
    frames: list[Frame] = []
    current = inspect.currentframe()
    try:
        frame = current.f_back if current is not None else None
        for _ in range(skip):
            if frame is None:
                break
            frame = frame.f_back
        while frame is not None and len(frames) < depth:
            frames.append(_frame_of(frame))
            frame = frame.f_back
    finally:
        del current
    return CallStack(frames=tuple(frames))


def from_traceback(tb: TracebackType | None, depth: int | None = None) -> CallStack:
    """Turn the traceback of a raised exception into a call stack.

    Tracebacks run from the catching frame towards the raising one, so the
    order is reversed to put the raising frame first.
    """
    if depth is None:
        depth = get_settings().call_stack_depth
    frames = [_frame_of(frame, line) for frame, line in traceback.walk_tb(tb)]
    frames.reverse()
    return CallStack(frames=tuple(frames[:depth]))
