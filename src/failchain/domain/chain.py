"""Walking a chain of wrapped errors."""

from __future__ import annotations

from typing import TypeVar

from .protocols import Unwrapper

T = TypeVar("T")


def unwrap_once(err: BaseException) -> BaseException | None:
    """Return the error directly underneath *err*.

    Errors exposing ``unwrap()`` (including every failchain node) are unwrapped
    through it. Any other exception is unwrapped through ``__cause__``, which is
    what ``raise ... from ...`` records. ``__context__`` is not followed.
    """
    if isinstance(err, Unwrapper):
        inner = err.unwrap()
    else:
        inner = getattr(err, "__cause__", None)
    if isinstance(inner, BaseException):
        return inner
    return None


class ChainIterator:
    """Lazy, forward-only walk over *err* and everything it wraps.

    The first step yields *err* itself. The walk stops when nothing is left to
    unwrap, or when an error that was already visited shows up again.
    """

    __slots__ = ("_next", "_current", "_seen")

    def __init__(self, err: BaseException | None) -> None:
        self._next = err
        self._current: BaseException | None = None
        self._seen: set[int] = set()

    def next(self) -> bool:
        """Advance to the next error. Return ``False`` once exhausted."""
        err = self._next
        if err is None or id(err) in self._seen:
            self._next = None
            self._current = None
            return False
        self._seen.add(id(err))
        self._current = err
        self._next = unwrap_once(err)
        return True

    @property
    def error(self) -> BaseException | None:
        return self._current

    def as_(self, kind: type[T]) -> T | None:
        """Return the current error if it is a *kind*, otherwise ``None``."""
        if isinstance(self._current, kind):
            return self._current
        return None

    def __iter__(self) -> ChainIterator:
        return self

    def __next__(self) -> BaseException:
        self.next()
        if self._current is None:
            raise StopIteration
        return self._current


def iterate(err: BaseException | None) -> ChainIterator:
    return ChainIterator(err)
