"""Core types: Option, Some, Nothing and CapturedError."""

from optionkit.types.captured import CapturedError
from optionkit.types.option import Nothing, NothingType, Option, Some

__all__ = [
    'CapturedError',
    'Nothing',
    'NothingType',
    'Option',
    'Some',
]
