"""CapturedError: the record an exception-capturing adapter returns."""

from __future__ import annotations

import msgspec

__all__ = ['CapturedError']


class CapturedError(msgspec.Struct, frozen=True):
    """An exception captured at an adapter boundary.

    Holds enough to describe the failure without re-raising it. The original
    exception object is kept so callers that do want to raise can do so
    explicitly.

    Attributes:
        message: ``str()`` of the exception.
        error_type: Qualified name of the exception class.
        exception: The captured exception object.
    """

    message: str
    error_type: str
    exception: BaseException

    @classmethod
    def from_exception(cls, exc: BaseException) -> CapturedError:
        """Capture an exception object."""
        return cls(str(exc), type(exc).__qualname__, exc)

    def to_exception(self) -> BaseException:
        """Return the original exception for raise-based code."""
        return self.exception
