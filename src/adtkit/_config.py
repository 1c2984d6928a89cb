"""Library configuration: LogFormat enum, AdtConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from adtkit._logging import configure_logging

__all__ = [
    'AdtConfig',
    'LogFormat',
    'get_config',
    'init',
]


class LogFormat(Enum):
    """Rendering used for log output."""

    JSON = 'json'
    CONSOLE = 'console'


@dataclass(frozen=True)
class AdtConfig:
    """Configuration for adtkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        log_format: Rendering of log output (JSON or CONSOLE).
    """

    log_level: str | None = None
    log_format: LogFormat = LogFormat.JSON


_config: AdtConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from ADTKIT_LOG_LEVEL, None when unset or empty."""
    level = os.environ.get('ADTKIT_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_log_format() -> LogFormat:
    """Read the log format from ADTKIT_LOG_FORMAT, defaulting to JSON."""
    env_format = os.environ.get('ADTKIT_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return LogFormat.CONSOLE
    if env_format and env_format != 'json':
        logging.warning("Unknown ADTKIT_LOG_FORMAT value '%s', defaulting to json", env_format)
    return LogFormat.JSON


def init(
    log_level: str | None = None,
    log_format: LogFormat | str | None = None,
) -> AdtConfig:
    """Initialize adtkit with the specified configuration.

    Unspecified values are read from the ADTKIT_LOG_LEVEL and
    ADTKIT_LOG_FORMAT environment variables.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        log_format: LogFormat enum or string ("json", "console").

    Returns:
        The AdtConfig that was set.

    Example:
        ```python
        import adtkit

        adtkit.init(log_level='DEBUG', log_format='console')
        adtkit.parse_json_value('{bad')  # emits a json_decode_failed event
        ```
    """
    global _config  # noqa: PLW0603

    if log_format is None:
        resolved_format = _detect_log_format()
    elif isinstance(log_format, str):
        resolved_format = LogFormat(log_format.lower())
    else:
        resolved_format = log_format

    resolved_level = log_level if log_level is not None else _detect_log_level()

    _config = AdtConfig(log_level=resolved_level, log_format=resolved_format)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_format is LogFormat.JSON)

    return _config


def get_config() -> AdtConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'adtkit not initialized. Call adtkit.init() first.'
        raise RuntimeError(msg)
    return _config
