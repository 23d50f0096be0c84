"""chain() and on_some(): explicit existential application."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from optionkit.compose.existential import Existential, exists, lift
from optionkit.types.option import Nothing, Option, Some

__all__ = ['chain', 'on_some']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')


# Overloads for type inference (up to 4 steps)
@overload
def chain(option: Option[T] | T, /) -> Existential[T]: ...
@overload
def chain(option: Option[T] | T, step1: Callable[[T], T1], /) -> Existential[T1]: ...
@overload
def chain(option: Option[T] | T, step1: Callable[[T], T1], step2: Callable[[T1], T2], /) -> Existential[T2]: ...
@overload
def chain(
    option: Option[T] | T,
    step1: Callable[[T], T1],
    step2: Callable[[T1], T2],
    step3: Callable[[T2], T3],
    /,
) -> Existential[T3]: ...
@overload
def chain(
    option: Option[T] | T,
    step1: Callable[[T], T1],
    step2: Callable[[T1], T2],
    step3: Callable[[T2], T3],
    step4: Callable[[T3], T4],
    /,
) -> Existential[T4]: ...


def chain(option: Any, /, *steps: Callable[..., Any]) -> Existential[Any]:
    """Apply steps to the contained value only if the option is present.

    Absence is checked once, at the head. If the option is ``Nothing`` no
    step is called. If it is ``Some(value)`` the steps run in order on the
    bare value, each receiving the previous step's return value as-is. The
    final result is wrapped in ``Some`` unless it already is an Option.

    Args:
        option: The head of the chain; bare values count as present.
        *steps: Functions to apply in sequence.

    Returns:
        An Existential wrapping the final Option.

    Example:
        ```python
        chain(Some('Hello'), lambda s: s.find('l'))
        # Existential(Some(value=2))

        chain(Nothing, lambda s: s.find('l'))  # the lambda never runs
        # Existential(Nothing)

        chain(Some(' 42 '), str.strip, int, lambda n: n * 2)
        # Existential(Some(value=84))
        ```
    """
    if not steps:
        return exists(option)

    match exists(option).to_option():
        case Some(value):
            current = value
            for step in steps:
                current = step(current)
            return lift(current)
        case _:
            return Existential(Nothing)


def on_some(option: Any, /, *steps: Callable[..., Any]) -> None:
    """Run steps for their side effects when the option is present.

    This is the void form of ``chain``: nothing is returned either way, so
    there is no ``Some(None)`` to mistake for a result.

    Example:
        ```python
        on_some(find_user(uid), print)  # prints only if a user was found
        ```
    """
    match exists(option).to_option():
        case Some(value):
            current = value
            for step in steps:
                current = step(current)
        case _:
            pass
