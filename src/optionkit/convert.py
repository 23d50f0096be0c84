"""Normalization of bare-or-optional operands."""

from __future__ import annotations

from typing import TypeIs, overload

from optionkit.types.option import Nothing, NothingType, Option, Some

__all__ = ['force', 'from_nullable', 'is_option', 'to_opt']


def is_option(value: object) -> TypeIs[Some[object] | NothingType]:
    """Check if a value is already an Option."""
    return isinstance(value, Some | NothingType)


@overload
def to_opt[T](value: Some[T]) -> Some[T]: ...
@overload
def to_opt(value: NothingType) -> NothingType: ...
@overload
def to_opt[T](value: T) -> Some[T]: ...


def to_opt(value: object) -> Option[object]:
    """Convert a value to an Option if it is not one already.

    Options are returned unchanged (the very same object) and an
    ``Existential`` gives up its wrapped option; anything else, ``None``
    included, is wrapped in ``Some``.

    Example:
        ```python
        to_opt(100)
        # Some(value=100)
        to_opt(Some(100))
        # Some(value=100)
        to_opt(Nothing)
        # Nothing
        ```
    """
    if is_option(value):
        return value

    from optionkit.compose.existential import Existential

    if isinstance(value, Existential):
        return value.to_option()
    return Some(value)


def force(operand: object) -> Option[object]:
    """Evaluate a lazily supplied operand and normalize it.

    Options and existential wrappers are taken as they are; any other
    callable is a supplier and is called once with no arguments; the result
    (or the operand itself, if it was a bare value) goes through ``to_opt``.
    """
    if is_option(operand):
        return operand

    from optionkit.compose.existential import Existential

    if isinstance(operand, Existential):
        return operand.to_option()
    if callable(operand):
        return to_opt(operand())
    return Some(operand)


def from_nullable[T](value: T | None) -> Option[T]:
    """Map None to Nothing and anything else to Some(value)."""
    if value is None:
        return Nothing
    return Some(value)
