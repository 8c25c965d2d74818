from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict

InfoMapping: TypeAlias = Mapping[str, Any]


class ConfiguredBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Frame(ConfiguredBaseModel):
    """A single entry of a captured call stack."""

    function: str
    module: str = ""
    file: str
    line: int

    @property
    def func(self) -> str:
        """Function name qualified with its module, when known."""
        if self.module:
            return f"{self.module}.{self.function}"
        return self.function


class CallStack(ConfiguredBaseModel):
    """Frames captured at one point in time, innermost first."""

    frames: tuple[Frame, ...] = ()

    def head_frame(self) -> Frame | None:
        return self.frames[0] if self.frames else None

    def __len__(self) -> int:
        return len(self.frames)

    def __bool__(self) -> bool:
        return bool(self.frames)
