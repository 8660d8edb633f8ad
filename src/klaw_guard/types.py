"""Result union returned by safe execution: SafeSuccess[T] | SafeFailure[E]."""

from __future__ import annotations

from typing import Literal, TypeIs

import msgspec

__all__ = ['SafeFailure', 'SafeRunResult', 'SafeSuccess']


class SafeSuccess[T](msgspec.Struct, frozen=True):
    """The run returned normally.

    Examples:
        >>> SafeSuccess(1).success
        True
        >>> SafeSuccess(1).result
        1
    """

    result: T

    @property
    def success(self) -> Literal[True]:
        """Indicate that the run succeeded."""
        return True

    def is_success(self) -> TypeIs[SafeSuccess[T]]:
        return True

    def is_failure(self) -> TypeIs[SafeFailure[object]]:
        return False


class SafeFailure[E](msgspec.Struct, frozen=True):
    """The run raised; error holds what was caught.

    Exceptions keep their traceback, and with it the frames of the failed
    call, so this struct stays tracked by the garbage collector.
    """

    error: E

    @property
    def success(self) -> Literal[False]:
        """Indicate that the run failed."""
        return False

    def is_success(self) -> TypeIs[SafeSuccess[object]]:
        return False

    def is_failure(self) -> TypeIs[SafeFailure[E]]:
        return True


type SafeRunResult[T, E = Exception] = SafeSuccess[T] | SafeFailure[E]
