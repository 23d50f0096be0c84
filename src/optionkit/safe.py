"""The safe surface of optionkit.

Importing from here gives every Option type and combinator, and nothing
that can raise when handed ``Nothing``: ``unwrap`` and ``expect`` live only
in ``optionkit.unsafe``. Code that sticks to this module can only reach a
contained value through a combinator, a ``match`` on ``Some`` or an
``is_some()`` check.

    from optionkit.safe import Some, Nothing, with_some, either
"""

from optionkit import (
    ArityError,
    BranchError,
    CapturedError,
    Existential,
    Nothing,
    NothingType,
    Option,
    OptionkitError,
    Some,
    WithSome,
    chain,
    either,
    exists,
    force,
    from_nullable,
    is_option,
    on_some,
    opt_and,
    opt_cmp,
    opt_or,
    require_none,
    require_some,
    to_opt,
    with_some,
    wrap_call,
    wrap_call_async,
    wrap_error_code,
    wrap_error_code_async,
    wrap_exception,
    wrap_exception_async,
)

__all__ = [
    'ArityError',
    'BranchError',
    'CapturedError',
    'Existential',
    'Nothing',
    'NothingType',
    'Option',
    'OptionkitError',
    'Some',
    'WithSome',
    'chain',
    'either',
    'exists',
    'force',
    'from_nullable',
    'is_option',
    'on_some',
    'opt_and',
    'opt_cmp',
    'opt_or',
    'require_none',
    'require_some',
    'to_opt',
    'with_some',
    'wrap_call',
    'wrap_call_async',
    'wrap_error_code',
    'wrap_error_code_async',
    'wrap_exception',
    'wrap_exception_async',
]
