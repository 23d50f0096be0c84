"""@wrap_call and @wrap_call_async: exceptions become Nothing."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from optionkit.convert import to_opt
from optionkit.decorators._absorb import log_absorbed
from optionkit.types.option import Nothing, Option

__all__ = ['wrap_call', 'wrap_call_async']

P = ParamSpec('P')
T = TypeVar('T')


@overload
def wrap_call[**P, T](
    func: Callable[P, T],
) -> Callable[P, Option[T]]: ...


@overload
def wrap_call[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Option[T]]]: ...


@overload
def wrap_call[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Option[T]]]: ...


def wrap_call[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Adapt a function that raises into one that returns an Option.

    The adapted function returns Some(result) on success and Nothing if one
    of ``exceptions`` is raised. Other exceptions propagate. A result that
    is already an Option is returned as-is.

    Can be used with or without arguments, or called on an existing
    function:
        @wrap_call
        def parse(text: str) -> int: ...

        @wrap_call(exceptions=(ValueError,))
        def specific(text: str) -> int: ...

        opt_int = wrap_call(int)

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to absorb. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Option[T] instead of T.

    Example:
        ```python
        opt_int = wrap_call(int)
        opt_int('10')
        # Some(value=10)
        opt_int('bob')
        # Nothing
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[T]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            log_absorbed('wrap_call', wrapped, e)
            return Nothing
        return to_opt(result)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def wrap_call_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Option[T]]]: ...


@overload
def wrap_call_async[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Option[T]]]]: ...


@overload
def wrap_call_async[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Option[T]]]]: ...


def wrap_call_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Async variant of wrap_call for coroutine functions.

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to absorb. Defaults to (Exception,).

    Returns:
        A wrapped async function that returns Option[T] instead of T.

    Example:
        ```python
        @wrap_call_async
        async def fetch(url: str) -> bytes:
            # may raise
            return await http_get(url)
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[T]:
        try:
            result = await wrapped(*args, **kwargs)
        except catch as e:
            log_absorbed('wrap_call_async', wrapped, e)
            return Nothing
        return to_opt(result)

    if func is not None:
        return wrapper(func)
    return wrapper
