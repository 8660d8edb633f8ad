"""@catch and @catch_async decorators for converting exceptions into SafeFailure."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from klaw_guard._logging import trace
from klaw_guard.types import SafeFailure, SafeSuccess

__all__ = ['catch', 'catch_async']


def _name_of(wrapped: Any) -> str:
    return getattr(wrapped, '__qualname__', None) or repr(wrapped)


@overload
def catch[**P, T](
    func: Callable[P, T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[P, SafeSuccess[T] | SafeFailure[Any]]: ...


@overload
def catch[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, SafeSuccess[T] | SafeFailure[Any]]]: ...


def catch(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns SafeFailure.

    Wraps a function so that it returns SafeSuccess(result) on return and
    SafeFailure(error) if an exception is raised.

    Can be used with or without arguments:
        @catch
        def risky(): ...

        @catch(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns SafeRunResult[T, E] instead of T.

    Example:
        ```python
        @catch
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # SafeSuccess(result=5.0)
        divide(10, 0)
        # SafeFailure(error=ZeroDivisionError('division by zero'))
        ```
    """
    caught = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> SafeSuccess[Any] | SafeFailure[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except caught as e:
            trace('safe_run_failed', function=_name_of(wrapped), error_type=type(e).__name__)
            return SafeFailure(e)
        return SafeSuccess(result)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def catch_async[**P, T](
    func: Callable[P, Awaitable[T]],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[P, Awaitable[SafeSuccess[T] | SafeFailure[Any]]]: ...


@overload
def catch_async[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[SafeSuccess[T] | SafeFailure[Any]]]]: ...


def catch_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that catches exceptions and returns SafeFailure.

    An exception raised while creating the awaitable is converted the same
    way as one raised while awaiting it.

    Can be used with or without arguments:
        @catch_async
        async def risky(): ...

        @catch_async(exceptions=(ValueError, TypeError))
        async def specific(): ...

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped async function that returns SafeRunResult[T, E] instead of T.
    """
    caught = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> SafeSuccess[Any] | SafeFailure[Any]:
        try:
            result = await wrapped(*args, **kwargs)
        except caught as e:
            trace('safe_run_failed', function=_name_of(wrapped), error_type=type(e).__name__)
            return SafeFailure(e)
        return SafeSuccess(result)

    if func is not None:
        return wrapper(func)
    return wrapper
