"""klaw-guard: Runtime guards and safe execution for Python 3.13+.

Predicates, assertion guards that narrow what they return, and safe execution
that turns exceptions into SafeSuccess / SafeFailure values.

Flat imports (preferred):
    from klaw_guard import check, assertions
    from klaw_guard import safe, safe_async, SafeSuccess, SafeFailure
    from klaw_guard import fail, default_to, when

Submodule imports (for organization):
    from klaw_guard.check import is_defined
    from klaw_guard.assertions import is_not_null
    from klaw_guard.decorators import catch, catch_async
"""

from msgspec import UNSET

# Predicates and guards
from klaw_guard import assertions, check

# Configuration
from klaw_guard._config import GuardConfig, get_config, init

# Decorators
from klaw_guard.decorators import catch, catch_async
from klaw_guard.errors import GuardError

# Safe execution
from klaw_guard.run import safe, safe_async
from klaw_guard.types import SafeFailure, SafeRunResult, SafeSuccess

# Helpers
from klaw_guard.util import default_to, fail, when

__all__ = [
    # Configuration
    'GuardConfig',
    # Errors
    'GuardError',
    # Result union
    'SafeFailure',
    'SafeRunResult',
    'SafeSuccess',
    'UNSET',
    # Modules
    'assertions',
    # Decorators
    'catch',
    'catch_async',
    'check',
    # Helpers
    'default_to',
    'fail',
    'get_config',
    'init',
    # Safe execution
    'safe',
    'safe_async',
    'when',
]
