"""Composition utilities: chain(), on_some() and the Existential wrapper."""

from optionkit.compose.chain import chain, on_some
from optionkit.compose.existential import Existential, exists

__all__ = [
    'Existential',
    'chain',
    'exists',
    'on_some',
]
