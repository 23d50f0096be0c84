"""Library configuration: OptionkitConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from optionkit._logging import configure_logging

__all__ = [
    'OptionkitConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class OptionkitConfig:
    """Configuration for optionkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured, else console output.
        log_absorbed: Log exceptions absorbed by the failure adapters at debug level.
            Only honoured when log_level is set.
    """

    log_level: str | None = None
    json_logs: bool = True
    log_absorbed: bool = False


_DEFAULT = OptionkitConfig()

# Global configuration (set by init())
_config: OptionkitConfig | None = None


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    logging.warning("Unknown %s value '%s', defaulting to %s", name, raw, default)
    return default


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    log_absorbed: bool | None = None,
) -> OptionkitConfig:
    """Initialize optionkit with the given configuration.

    Each option is resolved from the argument first, then from the
    environment (``OPTIONKIT_LOG_LEVEL``, ``OPTIONKIT_JSON_LOGS``,
    ``OPTIONKIT_LOG_ABSORBED``), then from the default. ``log_absorbed``
    defaults to True once a log level is set, and is always False without
    one.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON (True) or console (False) logs.
        log_absorbed: Log exceptions absorbed by the adapters. Ignored when no
            log level resolves.

    Returns:
        The OptionkitConfig that was set.

    Example:
        ```python
        import optionkit

        # Environment only
        optionkit.init()

        # Explicit configuration
        optionkit.init('DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level or os.environ.get('OPTIONKIT_LOG_LEVEL') or None
    resolved_json = json_logs if json_logs is not None else _env_bool('OPTIONKIT_JSON_LOGS', True)
    if log_absorbed is not None:
        resolved_absorbed = log_absorbed
    else:
        resolved_absorbed = _env_bool('OPTIONKIT_LOG_ABSORBED', resolved_level is not None)
    # Absorbed exceptions are only logged through logging configured here.
    resolved_absorbed = resolved_absorbed and resolved_level is not None

    _config = OptionkitConfig(
        log_level=resolved_level,
        json_logs=resolved_json,
        log_absorbed=resolved_absorbed,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> OptionkitConfig:
    """Get the current configuration.

    Returns:
        The configuration set by init(), or the defaults if init() has not
        been called.
    """
    if _config is None:
        return _DEFAULT
    return _config


def reset_config() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
