"""optionkit: safe combinators over Option values for Python 3.13+.

Flat imports (preferred):
    from optionkit import Option, Some, Nothing
    from optionkit import chain, exists, with_some, either, opt_and, opt_or, opt_cmp
    from optionkit import wrap_call, wrap_exception, wrap_error_code

Submodule imports (for organization):
    from optionkit.types import Option, Some, Nothing
    from optionkit.combinators import with_some, either
    from optionkit.decorators import wrap_call, require_some

Nothing exported here can raise on an absent value. Unchecked extraction
lives in ``optionkit.unsafe`` and must be imported explicitly.
"""

# Configuration
from optionkit._config import OptionkitConfig, get_config, init, reset_config

# Logging
from optionkit._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)

# Combinators
from optionkit.combinators import (
    WithSome,
    either,
    opt_and,
    opt_cmp,
    opt_or,
    with_some,
)

# Composition
from optionkit.compose import Existential, chain, exists, on_some

# Conversion
from optionkit.convert import force, from_nullable, is_option, to_opt

# Decorators
from optionkit.decorators import (
    require_none,
    require_some,
    wrap_call,
    wrap_call_async,
    wrap_error_code,
    wrap_error_code_async,
    wrap_exception,
    wrap_exception_async,
)

# Errors
from optionkit.errors import ArityError, BranchError, OptionkitError, UnwrapError

# Types
from optionkit.types import (
    CapturedError,
    Nothing,
    NothingType,
    Option,
    Some,
)

__all__ = [
    'ArityError',
    'BranchError',
    'CapturedError',
    'Existential',
    'Nothing',
    'NothingType',
    'Option',
    'OptionkitConfig',
    'OptionkitError',
    'Some',
    'UnwrapError',
    'WithSome',
    'add_log_hook',
    'chain',
    'clear_log_hooks',
    'configure_logging',
    'either',
    'exists',
    'force',
    'from_nullable',
    'get_config',
    'get_logger',
    'init',
    'is_option',
    'on_some',
    'opt_and',
    'opt_cmp',
    'opt_or',
    'remove_log_hook',
    'require_none',
    'require_some',
    'reset_config',
    'to_opt',
    'with_some',
    'wrap_call',
    'wrap_call_async',
    'wrap_error_code',
    'wrap_error_code_async',
    'wrap_exception',
    'wrap_exception_async',
]
