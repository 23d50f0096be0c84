"""@wrap_error_code and @wrap_error_code_async: status codes become Options."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec

import wrapt

from optionkit.types.option import Nothing, Option, Some

__all__ = ['wrap_error_code', 'wrap_error_code_async']

P = ParamSpec('P')


def _from_code(code: int) -> Option[int]:
    if code == 0:
        return Nothing
    return Some(code)


def wrap_error_code[**P](func: Callable[P, int]) -> Callable[P, Option[int]]:
    """Adapt a function returning an integer status code.

    The adapted function returns Nothing when the code is 0 (success) and
    Some(code) for any other code.

    Args:
        func: A function returning an int status code.

    Returns:
        A wrapped function that returns Option[int].

    Example:
        ```python
        opt_call = wrap_error_code(subprocess.call)
        either(opt_call(['true']), 0)
        # 0
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, int],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[int]:
        return _from_code(wrapped(*args, **kwargs))

    return wrapper(func)  # type: ignore[return-value]


def wrap_error_code_async[**P](func: Callable[P, Awaitable[int]]) -> Callable[P, Awaitable[Option[int]]]:
    """Async variant of wrap_error_code for coroutine functions."""

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[int]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[int]:
        return _from_code(await wrapped(*args, **kwargs))

    return wrapper(func)  # type: ignore[return-value]
