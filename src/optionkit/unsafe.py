"""Unchecked extraction.

The functions here raise on Nothing. They are not exported from ``optionkit``
or ``optionkit.safe``; code that needs them imports this module by name, so
every such call site is easy to find.
"""

from __future__ import annotations

from optionkit.errors import UnwrapError
from optionkit.types.option import Option, Some

__all__ = ['expect', 'unwrap']


def unwrap[T](option: Option[T]) -> T:
    """Return the contained value.

    Raises:
        UnwrapError: If the option is Nothing.
    """
    match option:
        case Some(value):
            return value
        case _:
            raise UnwrapError


def expect[T](option: Option[T], msg: str) -> T:
    """Return the contained value, failing with a custom message.

    Raises:
        UnwrapError: If the option is Nothing.
    """
    match option:
        case Some(value):
            return value
        case _:
            raise UnwrapError(msg)
