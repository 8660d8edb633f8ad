"""Assertion guards that raise on a violated condition.

Use through the module namespace, since the names mirror the predicates in
klaw_guard.check:

    from klaw_guard import assertions

    assertions.is_string(value)
"""

from klaw_guard.assertions.guards import (
    is_bigint,
    is_boolean,
    is_defined,
    is_equal,
    is_false,
    is_function,
    is_not_defined,
    is_not_equal,
    is_not_null,
    is_not_null_or_undefined,
    is_not_undefined,
    is_null,
    is_number,
    is_object,
    is_one_of,
    is_string,
    is_symbol,
    is_true,
    is_undefined,
)

__all__ = [
    'is_bigint',
    'is_boolean',
    'is_defined',
    'is_equal',
    'is_false',
    'is_function',
    'is_not_defined',
    'is_not_equal',
    'is_not_null',
    'is_not_null_or_undefined',
    'is_not_undefined',
    'is_null',
    'is_number',
    'is_object',
    'is_one_of',
    'is_string',
    'is_symbol',
    'is_true',
    'is_undefined',
]
