from __future__ import annotations

import asyncio
import functools
import inspect
import traceback
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from loguru import logger

from failchain.application.accessors import code_of, info_list_of, message_of
from failchain.application.compose import custom
from failchain.application.wrappers import with_call_stack, with_code
from failchain.config import get_settings
from failchain.domain.protocols import Code, Wrapper

P = ParamSpec("P")
R = TypeVar("R")


def _format_tail(exc: BaseException, *, limit: int = 6) -> str:
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(tb[-limit:])


def _merged_info(err: BaseException) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    # outer entries win over inner ones with the same key
    for info in reversed(info_list_of(err)):
        merged.update(info)
    return merged


def log_failure(
    err: BaseException,
    log=logger,  # loguru logger-like
    level: str | None = None,
) -> None:
    """Log *err* with its code, message and info bound to the record."""
    code = code_of(err)
    log.bind(
        error_code=None if code is None else code.error_code(),
        error_message=message_of(err),
        error_info=_merged_info(err),
    ).opt(exception=err).log(level or get_settings().log_level, "{}", str(err))


def wrap_exceptions(
    code: Code, *wrappers: Wrapper
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to log short traceback and translate errors into *code*."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    logger.opt(exception=exc).error("{}", _format_tail(exc))
                    raise custom(
                        exc, with_call_stack(skip=1), with_code(code), *wrappers
                    ) from exc

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                logger.opt(exception=exc).error("{}", _format_tail(exc))
                raise custom(
                    exc, with_call_stack(skip=1), with_code(code), *wrappers
                ) from exc

        return sync_wrapper  # type: ignore[return-value]

    return decorator
