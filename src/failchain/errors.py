from __future__ import annotations

import functools
from dataclasses import FrozenInstanceError, dataclass, field, fields
from typing import Any, Mapping


class ReadOnlyFieldsError(Exception):
    """Exception whose dataclass fields can't be reassigned once set.

    Attributes the interpreter manages, such as ``__traceback__`` or
    ``__notes__``, stay writable so the error can be raised, chained and
    annotated like any other exception.
    """

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__ and name in _field_names(type(self)):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _field_names(type(self)):
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    def __reduce__(self) -> tuple[Any, ...]:
        kwargs = {f.name: getattr(self, f.name) for f in fields(self) if f.init}
        return (functools.partial(type(self), **kwargs), ())


@functools.cache
def _field_names(cls: type) -> frozenset[str]:
    return frozenset(f.name for f in fields(cls))


@dataclass(eq=False)
class FailchainError(ReadOnlyFieldsError):
    """Raised when failchain itself is used incorrectly.

    Attributes:
        message: Human-readable message describing the error.
        code: Machine-readable code of the misuse.
        context: Optional structured context for diagnostics.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(kw_only=True, eq=False)
class NotAnError(FailchainError):
    value: object
    message: str = field(init=False)
    code: str = field(init=False, default="FAILCHAIN_NOT_AN_ERROR")

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"Expected an exception or None, got {type(self.value).__name__}",
        )
        object.__setattr__(self, "context", {"value": repr(self.value)})


@dataclass(kw_only=True, eq=False)
class InvalidCode(FailchainError):
    value: object
    message: str = field(init=False)
    code: str = field(init=False, default="FAILCHAIN_INVALID_CODE")

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "message",
            f"{type(self.value).__name__} does not implement error_code()",
        )
        object.__setattr__(self, "context", {"value": repr(self.value)})
