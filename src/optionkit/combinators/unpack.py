"""with_some(): unpack several options at once, all or nothing.

Sources are evaluated strictly left to right and evaluation stops at the
first ``Nothing``. When every source is present, the ``some`` branch is
called with one positional argument per source; otherwise the ``none``
branch is called with no arguments. Whatever the chosen branch returns is
the result.

Branch shapes are validated when the branch is registered, before any
source has been evaluated, so a malformed call never runs half its
expressions.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Self

from optionkit.convert import force
from optionkit.errors import ArityError, BranchError
from optionkit.types.option import Some

__all__ = ['WithSome', 'with_some']


def _accepts(fn: Callable[..., Any], count: int) -> bool | None:
    """Whether fn can be called with ``count`` positional arguments.

    Returns None when the signature cannot be inspected (some builtins).
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    return True


def _takes_no_positionals(fn: Callable[..., Any]) -> bool:
    """Whether fn declares no positional parameters, defaulted or variadic."""
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
        inspect.Parameter.VAR_POSITIONAL,
    )
    return not any(p.kind in positional for p in parameters)


def _describe(fn: Callable[..., Any]) -> str:
    return getattr(fn, '__qualname__', None) or repr(fn)


class WithSome[R]:
    """Builder for a with_some call.

    Register exactly one ``some`` branch and one ``none`` branch, then
    ``run()``. The builder can be run more than once; suppliers are called
    again on every run.

    Examples:
        >>> (
        ...     WithSome(Some(100), Some(200), Some(3))
        ...     .some(lambda x, y, z: (x + y) * z)
        ...     .none(lambda: 0)
        ...     .run()
        ... )
        900
        >>> WithSome(Nothing).some(lambda _: 'Hello').none(lambda: 'No value').run()
        'No value'
    """

    __slots__ = ('_none', '_some', '_some_takes_values', '_sources')

    def __init__(self, *sources: Any) -> None:
        if not sources:
            msg = 'with_some() needs at least one source'
            raise ArityError(msg, 'no_operands', expected=1)
        self._sources = sources
        self._some: Callable[..., R] | None = None
        self._none: Callable[[], R] | None = None
        self._some_takes_values = True

    def some(self, branch: Callable[..., R]) -> Self:
        """Register the branch run when every source is present.

        The branch takes one positional parameter per source, in order.
        Name a parameter ``_`` to ignore that value. A branch with no positional
        parameters at all, defaulted or variadic included, ignores every value.

        Raises:
            BranchError: If a some branch is already registered.
            ArityError: If the branch takes a different number of parameters.
        """
        if self._some is not None:
            msg = f'only one some branch is allowed, {_describe(self._some)} is already registered'
            raise BranchError(msg, 'duplicate_branch')

        count = len(self._sources)
        takes_values = _accepts(branch, count)
        if takes_values is False:
            if not _takes_no_positionals(branch):
                noun = 'value' if count == 1 else 'values'
                msg = f'some branch {_describe(branch)} must take {count} {noun} (or none at all)'
                raise ArityError(msg, expected=count)
        self._some = branch
        self._some_takes_values = takes_values is not False
        return self

    def none(self, branch: Callable[[], R]) -> Self:
        """Register the branch run when any source is absent.

        Raises:
            BranchError: If a none branch is already registered.
            ArityError: If the branch takes parameters.
        """
        if self._none is not None:
            msg = f'only one none branch is allowed, {_describe(self._none)} is already registered'
            raise BranchError(msg, 'duplicate_branch')
        if _accepts(branch, 0) is False:
            msg = f'none branch {_describe(branch)} must not take parameters'
            raise ArityError(msg, expected=0)
        self._none = branch
        return self

    def run(self) -> R:
        """Evaluate the sources and dispatch to a branch.

        Raises:
            BranchError: If either branch has not been registered.
        """
        if self._some is None:
            msg = 'with_some() must have a some branch'
            raise BranchError(msg)
        if self._none is None:
            msg = 'with_some() must have a none branch'
            raise BranchError(msg)

        values: list[Any] = []
        for source in self._sources:
            match force(source):
                case Some(value):
                    values.append(value)
                case _:
                    return self._none()

        if self._some_takes_values:
            return self._some(*values)
        return self._some()


def with_some[R](
    *sources: Any,
    some: Callable[..., R] | None = None,
    none: Callable[[], R] | None = None,
) -> R:
    """Run ``some(*values)`` if every source is present, else ``none()``.

    Each source is an Option, a bare value (present) or a zero-argument
    supplier returning an Option. Suppliers after the first absent source
    are never called.

    Args:
        *sources: One or more sources, evaluated left to right.
        some: Branch taking one positional argument per source.
        none: Branch taking no arguments.

    Returns:
        The return value of the branch that ran.

    Raises:
        BranchError: If a branch is missing.
        ArityError: If a branch has the wrong number of parameters.

    Example:
        ```python
        with_some(
            lambda: find('abc', 'b'),  # find() returns an Option
            lambda: find('def', 'f'),
            some=lambda first, second: first + second,
            none=lambda: -1,
        )
        ```
    """
    builder: WithSome[R] = WithSome(*sources)
    if some is not None:
        builder.some(some)
    if none is not None:
        builder.none(none)
    return builder.run()
