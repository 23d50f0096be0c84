"""opt_and() and opt_or(): boolean-style combination by presence."""

from __future__ import annotations

from typing import Any

from optionkit.convert import force
from optionkit.errors import ArityError
from optionkit.types.option import Nothing, NothingType, Option, Some

__all__ = ['opt_and', 'opt_or']


def opt_and(*operands: Any) -> Option[Any]:
    """Return the first Nothing, or the last operand if all are present.

    Operands are options, bare values (treated as present) or zero-argument
    suppliers. They are forced left to right and forcing stops at the first
    ``Nothing``: suppliers after it are never called.

    Args:
        *operands: At least one operand.

    Returns:
        Nothing, or the last operand as an Option.

    Raises:
        ArityError: If no operands are given.

    Example:
        ```python
        opt_and(Some('hello'), 100)
        # Some(value=100)
        opt_and(Nothing, expensive)  # expensive() is not called
        # Nothing
        ```
    """
    if not operands:
        msg = 'opt_and() needs at least one operand'
        raise ArityError(msg, 'no_operands', expected=1)

    last: Option[Any] = Nothing
    for operand in operands:
        last = force(operand)
        if isinstance(last, NothingType):
            return last
    return last


def opt_or(*operands: Any) -> Option[Any]:
    """Return the first present operand, or Nothing if all are absent.

    Operands are forced left to right and forcing stops at the first
    ``Some``: suppliers after it are never called.

    Args:
        *operands: At least one operand.

    Returns:
        The first Some, or Nothing.

    Raises:
        ArityError: If no operands are given.

    Example:
        ```python
        opt_or(Nothing, Some(100))
        # Some(value=100)
        opt_or(parse(text), 10)
        # Some(value=10) when parse fails
        ```
    """
    if not operands:
        msg = 'opt_or() needs at least one operand'
        raise ArityError(msg, 'no_operands', expected=1)

    for operand in operands:
        current = force(operand)
        if isinstance(current, Some):
            return current
    return Nothing
