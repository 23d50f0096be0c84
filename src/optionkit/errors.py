"""Exception hierarchy for malformed combinator calls.

Absence is never an exception in optionkit. The errors below signal misuse
of the combinator grammar (a missing branch, a branch with the wrong number
of parameters, an empty operand list) and are raised before any
caller-supplied expression is evaluated. ``UnwrapError`` is the exception of
the explicit ``optionkit.unsafe`` module and nothing else raises it.
"""

from __future__ import annotations

__all__ = [
    'ArityError',
    'BranchError',
    'OptionkitError',
    'UnwrapError',
]


class OptionkitError(Exception):
    """Base exception class for optionkit errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from optionkit import OptionkitError, Some, with_some

        try:
            with_some(Some(1), some=lambda a, b: a + b, none=lambda: 0)
        except OptionkitError as e:
            print(e.code)  # arity_mismatch
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message


class BranchError(OptionkitError):
    """A with_some call is missing a branch or registers one twice."""

    def __init__(self, message: str, code: str = 'missing_branch') -> None:
        super().__init__(message, code)


class ArityError(OptionkitError):
    """A branch or operand list has the wrong number of entries."""

    def __init__(self, message: str, code: str = 'arity_mismatch', *, expected: int | None = None) -> None:
        super().__init__(message, code)
        self.expected = expected


class UnwrapError(OptionkitError):
    """An unchecked extraction was attempted on Nothing."""

    def __init__(self, message: str = 'Called unwrap on Nothing') -> None:
        super().__init__(message, 'unwrap_nothing')
