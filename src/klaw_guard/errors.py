"""Error types raised by failed guards."""

from __future__ import annotations

__all__ = ['GuardError']


class GuardError(AssertionError):
    """A guard condition was violated.

    This is the generic error raised by the assertion helpers when the caller
    did not supply an exception of their own. It subclasses AssertionError so
    that code catching plain assertion failures keeps working.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
