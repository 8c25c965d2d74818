from __future__ import annotations

from .callstack import capture, from_traceback

__all__ = ["capture", "from_traceback"]
