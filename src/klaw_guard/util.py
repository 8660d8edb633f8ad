"""Small helpers the guards are built on: fail, default_to and when."""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, overload

from klaw_guard import check
from klaw_guard.errors import GuardError

__all__ = ['default_to', 'fail', 'when']


def fail(*, error_or_message: str | BaseException) -> NoReturn:
    """Raise a GuardError built from a message, or raise the given exception.

    Args:
        error_or_message: A message to wrap in GuardError, or an exception
            instance to raise unchanged.

    Raises:
        GuardError: If a message was given.
        BaseException: The given exception itself.
        TypeError: If the value is neither a string nor an exception.

    Example:
        ```python
        fail(error_or_message='boom')  # raises GuardError('boom')
        fail(error_or_message=KeyError('id'))  # raises that KeyError
        ```
    """
    if check.is_string(error_or_message):
        raise GuardError(error_or_message)
    if isinstance(error_or_message, BaseException):
        raise error_or_message

    msg = f'Expected a message or an exception, got {type(error_or_message).__name__}'
    raise TypeError(msg)


def default_to[T, D](value: T | None, fallback: D) -> T | D:
    """Return value unless it is null or undefined, in which case return fallback.

    Falsy values such as 0, '' and False are kept.
    """
    if check.is_null_or_undefined(value):
        return fallback
    return value


@overload
def when[T](condition: object, then: Callable[[], T]) -> T | None: ...


@overload
def when[T, U](condition: object, then: Callable[[], T], otherwise: Callable[[], U]) -> T | U: ...


def when(
    condition: object,
    then: Callable[[], object],
    otherwise: Callable[[], object] | None = None,
) -> object:
    """Call then() if condition is truthy, else otherwise() if it is callable.

    Returns:
        The result of the branch that ran, or None when no branch ran.
    """
    if condition:
        return then()
    if check.is_function(otherwise):
        return otherwise()
    return None
