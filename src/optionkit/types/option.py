"""Option type: Some[T] | Nothing for optional values.

Neither variant offers an unchecked extractor. A value leaves an option only
through the combinators, through ``match`` / ``isinstance`` narrowing on
``Some``, or through the explicit ``optionkit.unsafe`` module.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, NoReturn, TypeIs

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


def _no_truthiness(option: object) -> NoReturn:
    msg = (
        f'{option!r} cannot be used as a boolean; '
        'test presence with is_some() / is_none() instead'
    )
    raise TypeError(msg)


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The value is reachable as the
    ``value`` field once the option has been narrowed to ``Some``, which a
    type checker enforces: ``NothingType`` has no such field.

    Examples:
        >>> some = Some(42)
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> match some:
        ...     case Some(value):
        ...         print(value)
        42
    """

    value: T

    def __bool__(self) -> NoReturn:
        _no_truthiness(self)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the contained value (exactly one item)."""
        yield self.value

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the predicate holds for the contained value."""
        return bool(pred(self.value))

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value; the default factory is not called."""
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value for its side effects."""
        f(self.value)
        return self

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return self if exactly one of self and other is Some."""
        if isinstance(other, NothingType):
            return self
        return Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If either is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing return Nothing or a default value; none of them
    raise.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def __bool__(self) -> NoReturn:
        _no_truthiness(self)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over nothing."""
        return iter(())

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and(self, _pred: Callable[[Any], bool]) -> bool:
        """Return False since there is no value to test."""
        return False

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def map_or_else[T, U](self, default: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Compute the default since there's no value to map."""
        return default()

    def inspect[T](self, _f: Callable[[T], Any]) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def and_[T](self, _other: Some[T] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other if it is Some, else Nothing."""
        return other

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType
