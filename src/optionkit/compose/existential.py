"""Existential wrapper: dot-chaining that checks for Nothing once, at the head.

An ``Existential`` built from ``Nothing`` is absent: every forwarded access
returns the same empty wrapper, so nothing to the right of it is ever
evaluated. Built from ``Some(value)`` it is committed: attribute access and
calls are forwarded to the value, then to whatever each step returned, as-is.
A step that returns an Option hands that Option to the next step; it is
flattened only when the chain ends (``to_option()``, comparison, hashing).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

from optionkit.convert import is_option
from optionkit.types.option import Nothing, NothingType, Option, Some

__all__ = ['Existential', 'exists']


def lift(result: Any) -> Existential[Any]:
    """Wrap a step result as the current value of a committed chain."""
    return Existential._committed(result)


class Existential[T]:
    """An Option that forwards attribute access to its value.

    This provides safe method chaining: call methods on the wrapped value
    and get ``Existential``-wrapped results back, or a wrapped ``Nothing``
    if the head was absent. Presence is checked only at the head; once
    committed, every step runs on the previous step's raw result.

    Names starting with an underscore are never forwarded; use ``then`` for
    those and for attributes that collide with this class's own methods.

    Examples:
        >>> exists(Some('Hello')).find('l')
        Existential(Some(value=2))
        >>> exists(Nothing).find('l')
        Existential(Nothing)
        >>> exists(Some('Hello')).find('l').then(operator.eq, 2).is_truthy()
        True
        >>> exists(Some({'a': 1})).get('b').then(from_nullable).is_none()
        Existential(Some(value=True))
    """

    __slots__ = ('_option', '_stepped')

    def __init__(self, option: Option[T]) -> None:
        self._option = option
        self._stepped = False

    @classmethod
    def _committed(cls, result: Any) -> Existential[Any]:
        committed: Existential[Any] = cls(Some(result))
        committed._stepped = True
        return committed

    def __getattr__(self, name: str) -> Existential[Any]:
        if name.startswith('_'):
            raise AttributeError(name)
        match self._option:
            case Some(value):
                return lift(getattr(value, name))
            case _:
                return self

    def __call__(self, *args: Any, **kwargs: Any) -> Existential[Any]:
        match self._option:
            case Some(value):
                return lift(value(*args, **kwargs))
            case _:
                return self

    def then[U](self, f: Callable[..., U], /, *args: Any, **kwargs: Any) -> Existential[Any]:
        """Apply one step to the current value.

        Args:
            f: Called as ``f(value, *args, **kwargs)`` when the head was present.

        Returns:
            The wrapped result, or self unchanged when absent.
        """
        match self._option:
            case Some(value):
                return lift(f(value, *args, **kwargs))
            case _:
                return self

    def to_option(self) -> Option[T]:
        """End the chain and return its Option.

        A step result that is already an Option (or an Existential) is
        returned as that Option; any other result is wrapped in ``Some``.
        """
        match self._option:
            case Some(value) if self._stepped:
                if isinstance(value, Existential):
                    return value.to_option()
                if is_option(value):
                    return value
                return self._option
            case Some():
                return self._option
            case _:
                return Nothing

    def is_truthy(self) -> bool:
        """Explicit boolean conversion for a wrapped bool.

        Returns:
            True for Some(True); False for Some(False) and for Nothing.

        Raises:
            TypeError: If the wrapped value is not a bool.
        """
        match self.to_option():
            case Some(bool() as flag):
                return flag
            case Some(value):
                msg = f'is_truthy() needs a wrapped bool, got {type(value).__name__}'
                raise TypeError(msg)
            case _:
                return False

    def __bool__(self) -> NoReturn:
        msg = f'{self!r} cannot be used as a boolean; call is_truthy() explicitly'
        raise TypeError(msg)

    def __repr__(self) -> str:
        return f'Existential({self.to_option()!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Existential):
            return self.to_option() == other.to_option()
        if isinstance(other, Some | NothingType):
            return self.to_option() == other
        return NotImplemented

    def __hash__(self) -> int:
        # Hash like the Option it compares equal to.
        return hash(self.to_option())


def exists[T](option: Option[T] | T) -> Existential[T]:
    """Start a fluent existential chain.

    Bare values are treated as present.

    Example:
        ```python
        exists(Some('Hello')).find('l').to_option()
        # Some(value=2)
        exists(Nothing).find('l').to_option()
        # Nothing
        ```
    """
    if isinstance(option, Existential):
        return option
    if is_option(option):
        return Existential(option)
    return Existential(Some(option))
