"""Predicates: pure functions that test a value's type or state.

Every predicate accepts any value, returns a bool and never raises. They double
as type guards, so a successful check narrows the value for the type checker.

`None` plays the role of null and `msgspec.UNSET` the role of undefined.

Example:
    ```python
    from klaw_guard import check

    check.is_null(None)  # True
    check.is_defined(0)  # True
    check.is_number(True)  # False, bools are not numbers here
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeGuard, TypeIs

import msgspec
from msgspec import UnsetType

__all__ = [
    'is_bigint',
    'is_boolean',
    'is_defined',
    'is_function',
    'is_null',
    'is_null_or_undefined',
    'is_number',
    'is_object',
    'is_string',
    'is_symbol',
    'is_undefined',
    'strict_equals',
]

_SCALARS = (str, bytes, bool, int, float, complex, Enum)


def is_null(val: object) -> TypeIs[None]:
    """Check if the value is null (None)."""
    return val is None


def is_undefined(val: object) -> TypeIs[UnsetType]:
    """Check if the value is undefined (msgspec.UNSET)."""
    return val is msgspec.UNSET


def is_null_or_undefined(val: object) -> TypeIs[None | UnsetType]:
    """Check if the value is null or undefined."""
    return is_null(val) or is_undefined(val)


def is_defined(val: object) -> bool:
    """Check if the value is defined (neither null nor undefined)."""
    return is_null_or_undefined(val) is False


def is_string(val: object) -> TypeIs[str]:
    """Check if the value is a string."""
    return isinstance(val, str)


def is_boolean(val: object) -> TypeIs[bool]:
    """Check if the value is a boolean."""
    return isinstance(val, bool)


def is_number(val: object) -> TypeGuard[int | float]:
    """Check if the value is a number (int or float, but not bool)."""
    return isinstance(val, int | float) and not isinstance(val, bool)


def is_bigint(val: object) -> TypeGuard[int]:
    """Check if the value is an arbitrary-precision integer (int, but not bool)."""
    return isinstance(val, int) and not isinstance(val, bool)


def is_symbol(val: object) -> TypeIs[Enum]:
    """Check if the value is a symbol, i.e. an Enum member."""
    return isinstance(val, Enum)


def is_function(val: object) -> TypeIs[Callable[..., Any]]:
    """Check if the value is callable."""
    return callable(val)


def is_object(val: object) -> bool:
    """Check if the value is a composite object.

    Null, undefined, scalars (str, bytes, bool, numbers, Enum members) and
    callables are not objects; containers and instances of ordinary classes are.
    """
    if is_null_or_undefined(val) or isinstance(val, _SCALARS):
        return False
    return not callable(val)


def strict_equals(a: object, b: object) -> bool:
    """Compare two values without coercion.

    Values are strictly equal when they are the same object, or when they
    have exactly the same type and compare equal. `1`, `1.0` and `True` are
    therefore all distinct, while any value is strictly equal to itself.

    Errors raised by a type's __eq__, or by taking the truth value of what it
    returns (an elementwise array comparison, for instance), propagate.
    """
    if a is b:
        return True
    return type(a) is type(b) and bool(a == b)
