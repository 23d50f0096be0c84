"""@require_some and @require_none: lift functions over optional arguments."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

import wrapt

from optionkit.convert import to_opt
from optionkit.types.option import Nothing, NothingType, Option, Some

__all__ = ['require_none', 'require_some']

_ABSENT = object()


def _bind(wrapped: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> inspect.BoundArguments:
    bound = inspect.signature(wrapped).bind(*args, **kwargs)
    bound.apply_defaults()
    return bound


def _unwrap(value: Any) -> Any:
    match value:
        case Some(inner):
            return inner
        case NothingType():
            return _ABSENT
        case _:
            return value


def _flat_values(bound: inspect.BoundArguments) -> list[Any]:
    """All argument values in order, with *args and **kwargs spread out."""
    values: list[Any] = []
    for name, value in bound.arguments.items():
        kind = bound.signature.parameters[name].kind
        if kind is inspect.Parameter.VAR_POSITIONAL:
            values.extend(value)
        elif kind is inspect.Parameter.VAR_KEYWORD:
            values.extend(value.values())
        else:
            values.append(value)
    return values


def require_some[T](func: Callable[..., T]) -> Callable[..., Option[Any]]:
    """Decorator that unwraps every optional argument before the call.

    The decorated function is written against bare values. Arguments are
    bound to its signature (defaults included) and every Option among them
    is unwrapped, left to right. If any of them is Nothing the function is
    not called and Nothing is returned. Arguments that are not Options are
    passed through unchanged. The return value goes through ``to_opt``.

    Args:
        func: The function to lift.

    Returns:
        A wrapped function that accepts Options and returns an Option.

    Example:
        ```python
        @require_some
        def total(a: int, b: int, c: int = Some(10)) -> int:
            return a + b + c

        total(Some(10), Some(100))
        # Some(value=120)
        total(Some(10), Nothing)  # the body does not run
        # Nothing
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[Any]:
        bound = _bind(wrapped, args, kwargs)
        for name, value in list(bound.arguments.items()):
            kind = bound.signature.parameters[name].kind
            if kind is inspect.Parameter.VAR_POSITIONAL:
                unwrapped = tuple(_unwrap(item) for item in value)
                if any(item is _ABSENT for item in unwrapped):
                    return Nothing
                bound.arguments[name] = unwrapped
            elif kind is inspect.Parameter.VAR_KEYWORD:
                unwrapped_kw = {key: _unwrap(item) for key, item in value.items()}
                if any(item is _ABSENT for item in unwrapped_kw.values()):
                    return Nothing
                bound.arguments[name] = unwrapped_kw
            else:
                unwrapped_one = _unwrap(value)
                if unwrapped_one is _ABSENT:
                    return Nothing
                bound.arguments[name] = unwrapped_one
        return to_opt(wrapped(*bound.args, **bound.kwargs))

    return wrapper(func)


def require_none[**P, T](func: Callable[P, T]) -> Callable[P, Option[Any]]:
    """Decorator that runs the function only if every optional argument is absent.

    If any Option argument (defaults included) is Some, the function is
    not called and Nothing is returned. Otherwise it is called with the
    arguments unchanged and its return value goes through ``to_opt``.

    Args:
        func: The function to guard.

    Returns:
        A wrapped function that returns an Option.

    Example:
        ```python
        @require_none
        def fallback(cached: Option[int]) -> int:
            return 10

        fallback(Nothing)
        # Some(value=10)
        fallback(Some(100))
        # Nothing
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Option[Any]:
        bound = _bind(wrapped, args, kwargs)
        if any(isinstance(value, Some) for value in _flat_values(bound)):
            return Nothing
        return to_opt(wrapped(*args, **kwargs))

    return wrapper(func)  # type: ignore[return-value]
