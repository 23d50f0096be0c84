"""Decorators: failure adapters and argument lifting, with async variants."""

from optionkit.decorators.call import wrap_call, wrap_call_async
from optionkit.decorators.error_code import wrap_error_code, wrap_error_code_async
from optionkit.decorators.exception import wrap_exception, wrap_exception_async
from optionkit.decorators.lift import require_none, require_some

__all__ = [
    'require_none',
    'require_some',
    'wrap_call',
    'wrap_call_async',
    'wrap_error_code',
    'wrap_error_code_async',
    'wrap_exception',
    'wrap_exception_async',
]
