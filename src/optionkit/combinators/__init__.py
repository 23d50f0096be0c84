"""Combinators: either, opt_and, opt_or, opt_cmp and with_some."""

from optionkit.combinators.compare import opt_cmp
from optionkit.combinators.either import either
from optionkit.combinators.logic import opt_and, opt_or
from optionkit.combinators.unpack import WithSome, with_some

__all__ = [
    'WithSome',
    'either',
    'opt_and',
    'opt_cmp',
    'opt_or',
    'with_some',
]
