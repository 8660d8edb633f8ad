"""Guard configuration: GuardConfig, init and get_config."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_guard._logging import configure_logging

__all__ = [
    'GuardConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class GuardConfig:
    """Configuration for klaw-guard.

    Attributes:
        legacy_type_checks: If True, the type-class assertions other than
            is_string all test with the string predicate, matching the
            behaviour of earlier releases.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    legacy_type_checks: bool = False
    log_level: str | None = None


# Global configuration (set by init())
_config: GuardConfig | None = None


def _detect_legacy_type_checks() -> bool:
    """Read KLAW_GUARD_LEGACY_TYPE_CHECKS from the environment."""
    raw = os.environ.get('KLAW_GUARD_LEGACY_TYPE_CHECKS', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw and raw not in _FALSY:
        logging.warning("Unknown KLAW_GUARD_LEGACY_TYPE_CHECKS value '%s', defaulting to off", raw)
    return False


def _detect_log_level() -> str | None:
    """Read KLAW_GUARD_LOG_LEVEL from the environment."""
    raw = os.environ.get('KLAW_GUARD_LOG_LEVEL', '').strip()
    return raw.upper() or None


def init(
    legacy_type_checks: bool | None = None,
    log_level: str | None = None,
) -> GuardConfig:
    """Initialize klaw-guard with the given configuration.

    Args:
        legacy_type_checks: Reproduce the legacy type-class assertions.
            Read from the environment if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the
            environment if None; silent if still unset.

    Returns:
        The GuardConfig that was set.

    Example:
        ```python
        from klaw_guard import init

        init(log_level="DEBUG")
        init(legacy_type_checks=True)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_legacy = _detect_legacy_type_checks() if legacy_type_checks is None else legacy_type_checks
    resolved_level = _detect_log_level() if log_level is None else log_level

    _config = GuardConfig(
        legacy_type_checks=resolved_legacy,
        log_level=resolved_level,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> GuardConfig:
    """Get the current configuration.

    Before init() is called the environment is read once, on first use, and
    the resulting config is kept. Logging is not configured on that path.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = GuardConfig(
            legacy_type_checks=_detect_legacy_type_checks(),
            log_level=_detect_log_level(),
        )
    return _config
