"""either(): default with a lazy fallback."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

from optionkit.convert import force
from optionkit.types.option import Option, Some

__all__ = ['either']


@overload
def either[T](option: Option[T] | T | Callable[[], Option[T] | T], fallback: Callable[[], T], /) -> T: ...
@overload
def either[T](option: Option[T] | T | Callable[[], Option[T] | T], fallback: T, /) -> T: ...


def either(option: Any, fallback: Any, /) -> Any:
    """Return the contained value, or the fallback if the option is absent.

    A callable fallback is a deferred computation: it is called with no
    arguments only when the option is ``Nothing``, so it may have side
    effects. To use a callable itself as the default, wrap it:
    ``either(opt, lambda: func)``.

    Args:
        option: The option to read; bare values count as present. A callable
            option is a supplier, called once before the check.
        fallback: A default value, or a zero-argument callable producing one.

    Returns:
        The contained value or the fallback.

    Example:
        ```python
        either(Some('Correct'), 'Wrong')
        # 'Correct'
        either(Nothing, load_default)  # load_default() is called
        either(Some(1), load_default)  # load_default is not called
        # 1
        ```
    """
    match force(option):
        case Some(value):
            return value
        case _:
            if callable(fallback):
                return fallback()
            return fallback
