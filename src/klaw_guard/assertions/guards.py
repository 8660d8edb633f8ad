"""Assertion guards: raise when a condition is violated, return the value otherwise.

Each guard takes an optional `error_or_message`. A string is raised as
GuardError(message); an exception instance is raised unchanged; when omitted,
a GuardError with a message describing the violated condition is raised.

On success the checked value is returned, so the caller gets it back with the
narrowed type:

    ```python
    from klaw_guard import assertions

    name = assertions.is_not_null(user.name)
    assertions.is_one_of(mode, ['r', 'w'], 'bad mode')
    assertions.is_true(ready, RuntimeError('not ready'))
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, Literal, NoReturn

from msgspec import UnsetType

from klaw_guard import check, util
from klaw_guard._config import get_config
from klaw_guard._logging import trace

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

type ErrorOrMessage = str | BaseException | None


def _violated(guard: str, error_or_message: ErrorOrMessage, default_message: str) -> NoReturn:
    resolved = util.default_to(error_or_message, default_message)
    trace('guard_failed', guard=guard, message=str(resolved))
    util.fail(error_or_message=resolved)


def is_not_null[T](val: T | None, error_or_message: ErrorOrMessage = None) -> T:
    """Assert that a value is not null."""
    if check.is_null(val) is True:
        _violated('is_not_null', error_or_message, 'Non-null value is expected, but null received.')
    return val


def is_null(val: object, error_or_message: ErrorOrMessage = None) -> None:
    """Assert that a value is null."""
    if val is not None:
        _violated('is_null', error_or_message, 'null value is expected, but non-null received.')


def is_not_undefined[T](val: T | UnsetType, error_or_message: ErrorOrMessage = None) -> T:
    """Assert that a value is not undefined (msgspec.UNSET)."""
    if check.is_undefined(val) is True:
        _violated(
            'is_not_undefined',
            error_or_message,
            'Non-undefined value is expected, but undefined received.',
        )
    return val  # type: ignore[return-value]


def is_undefined(val: object, error_or_message: ErrorOrMessage = None) -> UnsetType:
    """Assert that a value is undefined (msgspec.UNSET)."""
    if not check.is_undefined(val):
        _violated(
            'is_undefined',
            error_or_message,
            'undefined value is expected, but non-undefined received.',
        )
    return val


def is_not_null_or_undefined[T](val: T | UnsetType | None, error_or_message: ErrorOrMessage = None) -> T:
    """Assert that a value is neither null nor undefined."""
    if check.is_null_or_undefined(val) is True:
        _violated(
            'is_not_null_or_undefined',
            error_or_message,
            'non-null and non-undefined value is expected, but null or undefined received.',
        )
    return val  # type: ignore[return-value]


def is_defined[T](val: T | UnsetType | None, error_or_message: ErrorOrMessage = None) -> T:
    """Assert that a value is defined. Same as is_not_null_or_undefined."""
    return is_not_null_or_undefined(val, error_or_message)


def is_not_defined(val: object, error_or_message: ErrorOrMessage = None) -> None | UnsetType:
    """Assert that a value is null or undefined."""
    if check.is_null_or_undefined(val) is False:
        _violated(
            'is_not_defined',
            error_or_message,
            'Null or undefined value is expected, but non-null and non-undefined received.',
        )
    return val  # type: ignore[return-value]


def is_equal[T](val: object, expected: T, error_or_message: ErrorOrMessage = None) -> T:
    """Assert that a value is strictly equal to the expected value.

    See check.strict_equals: values of different types never match, so
    `is_equal(1, 1.0)` fails.
    """
    if not check.strict_equals(val, expected):
        _violated(
            'is_equal',
            error_or_message,
            f'Value is expected to be equal to {expected!r}, but received {val!r}',
        )
    return val  # type: ignore[return-value]


def is_not_equal[T](val: T, expected: object, error_or_message: ErrorOrMessage = None) -> T:
    """Assert that a value is not strictly equal to the given value."""
    if check.strict_equals(val, expected):
        _violated(
            'is_not_equal',
            error_or_message,
            f'Value is expected to be not equal to {expected!r}, but received {val!r}',
        )
    return val


def is_one_of[T](val: object, values: Iterable[T], error_or_message: ErrorOrMessage = None) -> T:
    """Assert that a value is strictly equal to one of the allowed values.

    Candidates are consumed lazily and iteration stops at the first match.
    An empty collection of allowed values always fails.
    """
    seen: list[T] = []
    for candidate in values:
        if check.strict_equals(val, candidate):
            return val  # type: ignore[return-value]
        seen.append(candidate)

    allowed = ', '.join(repr(candidate) for candidate in seen)
    _violated(
        'is_one_of',
        error_or_message,
        f'Value is expected to be one of [{allowed}], but received {val!r}',
    )


def is_true(val: object, error_or_message: ErrorOrMessage = None) -> Literal[True]:
    """Assert that the value is True (identity, not truthiness)."""
    if val is not True:
        _violated('is_true', error_or_message, 'Value is expected to be true')
    return True


def is_false(val: object, error_or_message: ErrorOrMessage = None) -> Literal[False]:
    """Assert that the value is False (identity, not falsiness)."""
    if val is not False:
        _violated('is_false', error_or_message, 'Value is expected to be false')
    return False


# --- Type-class assertions ---


def _type_predicate(predicate: Callable[[object], bool]) -> Callable[[object], bool]:
    # Legacy mode tests every type class with the string predicate.
    if get_config().legacy_type_checks:
        return check.is_string
    return predicate


def _check_type(
    guard: str,
    predicate: Callable[[object], bool],
    described: str,
    val: object,
    error_or_message: ErrorOrMessage,
) -> None:
    if _type_predicate(predicate)(val) is False:
        _violated(
            guard,
            error_or_message,
            f'Value is expected to be {described}, but received {type(val).__name__}',
        )


def is_boolean(val: object, error_or_message: ErrorOrMessage = None) -> bool:
    """Assert that the value is a boolean."""
    _check_type('is_boolean', check.is_boolean, 'a boolean', val, error_or_message)
    return val  # type: ignore[return-value]


def is_string(val: object, error_or_message: ErrorOrMessage = None) -> str:
    """Assert that the value is a string."""
    if check.is_string(val) is False:
        _violated(
            'is_string',
            error_or_message,
            f'Value is expected to be a string, but received {type(val).__name__}',
        )
    return val  # type: ignore[return-value]


def is_number(val: object, error_or_message: ErrorOrMessage = None) -> int | float:
    """Assert that the value is a number (int or float, not bool)."""
    _check_type('is_number', check.is_number, 'a number', val, error_or_message)
    return val  # type: ignore[return-value]


def is_bigint(val: object, error_or_message: ErrorOrMessage = None) -> int:
    """Assert that the value is an integer (not bool)."""
    _check_type('is_bigint', check.is_bigint, 'a bigint', val, error_or_message)
    return val  # type: ignore[return-value]


def is_symbol(val: object, error_or_message: ErrorOrMessage = None) -> Enum:
    """Assert that the value is a symbol (Enum member)."""
    _check_type('is_symbol', check.is_symbol, 'a symbol', val, error_or_message)
    return val  # type: ignore[return-value]


def is_function(val: object, error_or_message: ErrorOrMessage = None) -> Callable[..., Any]:
    """Assert that the value is callable."""
    _check_type('is_function', check.is_function, 'a function', val, error_or_message)
    return val  # type: ignore[return-value]


def is_object(val: object, error_or_message: ErrorOrMessage = None) -> object:
    """Assert that the value is a composite object."""
    _check_type('is_object', check.is_object, 'an object', val, error_or_message)
    return val
