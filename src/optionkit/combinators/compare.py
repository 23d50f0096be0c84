"""opt_cmp(): comparison of underlying values that doubles as a filter."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from optionkit.convert import to_opt
from optionkit.types.option import Nothing, Option, Some

__all__ = ['opt_cmp']


def opt_cmp[T](a: Option[T] | T, cmp: Callable[[T, T], Any], b: Option[T] | T) -> Option[T]:
    """Compare the values of two options, keeping the left one on success.

    Both sides are normalized with ``to_opt``. If either is ``Nothing`` the
    result is ``Nothing`` and ``cmp`` is not called. Otherwise the result is
    the left operand (as ``Some``) when ``cmp(a, b)`` is true, else
    ``Nothing``. The left value is returned rather than a bool, so
    comparisons can filter values and feed ``opt_and`` / ``either``.

    Example:
        ```python
        opt_cmp(Some(5), operator.lt, Some(10))
        # Some(value=5)
        opt_cmp('hello', operator.eq, Some('world'))
        # Nothing
        either(opt_and(opt_cmp(colour, operator.eq, 'green'), 5), 3)
        # 5 if colour is 'green', otherwise 3
        ```
    """
    left = to_opt(a)
    right = to_opt(b)
    match left, right:
        case Some(x), Some(y) if cmp(x, y):
            return left
        case _:
            return Nothing
