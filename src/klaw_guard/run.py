"""Safe execution: run a callable and turn a raised exception into data.

Example:
    ```python
    from klaw_guard import safe, safe_async

    safe(lambda: 1)
    # SafeSuccess(result=1)

    safe(lambda: 1 / 0)
    # SafeFailure(error=ZeroDivisionError('division by zero'))

    async def fetch() -> str:
        raise ValueError('Failed')

    await safe_async(fetch)
    # SafeFailure(error=ValueError('Failed'))
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from klaw_guard.decorators import catch, catch_async
from klaw_guard.types import SafeFailure, SafeRunResult, SafeSuccess

__all__ = [
    'SafeFailure',
    'SafeRunResult',
    'SafeSuccess',
    'safe',
    'safe_async',
]


def safe[T](
    fn: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> SafeRunResult[T, Any]:
    """Run a function safely and return its result, or the exception it raised.

    Args:
        fn: Zero-argument function to run.
        exceptions: Exception types to convert. Defaults to (Exception,);
            anything else propagates.

    Returns:
        SafeSuccess(result) on return, SafeFailure(error) on a caught exception.
    """
    return catch(fn, exceptions=exceptions)()


async def safe_async[T](
    fn: Callable[[], Awaitable[T]],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> SafeRunResult[T, Any]:
    """Await an async function safely and return its result, or the exception it raised.

    Both a failure while calling fn and a failure of the awaited value are
    converted; the returned coroutine never raises a caught exception type.

    Args:
        fn: Zero-argument function returning an awaitable.
        exceptions: Exception types to convert. Defaults to (Exception,).

    Returns:
        SafeSuccess(result) on completion, SafeFailure(error) on a caught exception.
    """
    return await catch_async(fn, exceptions=exceptions)()
