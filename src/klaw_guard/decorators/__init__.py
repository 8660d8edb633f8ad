"""Decorators: @catch and @catch_async."""

from klaw_guard.decorators.safe import catch, catch_async

__all__ = [
    'catch',
    'catch_async',
]
