from __future__ import annotations

from dataclasses import dataclass
from typing import override

from .protocols import Code


@dataclass(frozen=True, slots=True)
class StringCode:
    """Code backed by a plain string.

    Equality includes the concrete type, so a ``StringCode("a")`` never equals a
    user-defined code whose identifier is also ``"a"``.
    """

    value: str

    def error_code(self) -> str:
        return self.value

    @override
    def __str__(self) -> str:
        return self.value


UNKNOWN = StringCode("unknown")


def same_code(a: Code | None, b: Code | None) -> bool:
    """Return ``True`` if *a* and *b* are the same code.

    ``None`` stands for "no code" and only matches ``None``.
    """
    if a is None or b is None:
        return a is b
    return type(a) is type(b) and a == b
