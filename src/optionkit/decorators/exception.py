"""@wrap_exception and @wrap_exception_async: capture the exception itself."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec

import wrapt

from optionkit.decorators._absorb import log_absorbed
from optionkit.types.captured import CapturedError
from optionkit.types.option import Nothing, Option, Some

__all__ = ['wrap_exception', 'wrap_exception_async']

P = ParamSpec('P')


def wrap_exception[**P](
    func: Callable[P, Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Adapt a function so that a raised exception is its result.

    Meant for functions called for their effect. The adapted function
    returns Nothing when the call completes (its return value is discarded)
    and Some(CapturedError) when one of ``exceptions`` is raised.

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to capture. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Option[CapturedError].

    Example:
        ```python
        save = wrap_exception(store.save)
        with_some(
            save(record),
            some=lambda err: log.warning('save failed', error=err.message),
            none=lambda: None,
        )
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[CapturedError]:
        try:
            wrapped(*args, **kwargs)
        except catch as e:
            log_absorbed('wrap_exception', wrapped, e)
            return Some(CapturedError.from_exception(e))
        return Nothing

    if func is not None:
        return wrapper(func)
    return wrapper


def wrap_exception_async[**P](
    func: Callable[P, Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async variant of wrap_exception for coroutine functions."""
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[CapturedError]:
        try:
            await wrapped(*args, **kwargs)
        except catch as e:
            log_absorbed('wrap_exception_async', wrapped, e)
            return Some(CapturedError.from_exception(e))
        return Nothing

    if func is not None:
        return wrapper(func)
    return wrapper
