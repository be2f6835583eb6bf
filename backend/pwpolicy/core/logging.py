# ruff: noqa: A005
"""Structured logging for pwpolicy.

Every module obtains its logger through ``get_logger(__name__)``. Loggers are
thin wrappers over structlog that run each event through a chain of filters
before it is rendered, so candidate passwords never reach a sink even when a
caller passes one as a field by mistake.

Architecture:
- LogConfig: validated logging options
- LogFilter: event rewriting (masking of secret-looking fields, truncation)
- StructuredLogger: level gate plus filter chain in front of structlog,
  resolved against the active configuration on every event
- LoggerFactory: structlog/stdlib setup, installed only by configure_logging()

Note: This module shadows the standard library 'logging' module inside the
package; the standard library is imported absolutely.
"""

import logging
import re
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

from pwpolicy.core.enums import Environment, LogFormat, LogLevel
from pwpolicy.core.errors import ConfigurationError

MIN_MESSAGE_LENGTH = 1000
DEFAULT_MASK = "***[MASKED]"

# Field names whose values are never logged verbatim
SENSITIVE_FIELD_PATTERN = re.compile(
    r"password|passwd|candidate|token|secret|credential", re.IGNORECASE
)


@dataclass
class LogConfig:
    """
    Logging options, validated on construction.

    Usage Example:
        configure_logging(LogConfig(level=LogLevel.DEBUG, format=LogFormat.CONSOLE))
    """

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    environment: Environment = Environment.DEVELOPMENT
    include_timestamps: bool = True
    mask_sensitive_fields: bool = True
    max_message_length: int = 10000

    def __post_init__(self) -> None:
        if self.max_message_length < MIN_MESSAGE_LENGTH:
            raise ConfigurationError(
                f"Maximum message length must be at least {MIN_MESSAGE_LENGTH} characters",
                config_key="max_message_length",
            )

        if self.level is LogLevel.DEBUG and not self.environment.allows_debug_logging:
            raise ConfigurationError(
                f"Debug logging is not allowed in {self.environment.value}",
                config_key="log_level",
            )


# =====================================================================================
# FILTERS
# =====================================================================================


class LogFilter(ABC):
    """Rewrites an event dictionary before it is emitted."""

    @abstractmethod
    def apply(self, event: dict[str, Any]) -> dict[str, Any] | None:
        """Return the rewritten event, or None to drop it."""


class SensitiveDataFilter(LogFilter):
    """Replaces the values of secret-looking fields, including nested ones."""

    def __init__(self, mask: str = DEFAULT_MASK, preserve_length: bool = False):
        self.mask = mask
        self.preserve_length = preserve_length

    def apply(self, event: dict[str, Any]) -> dict[str, Any]:
        return {key: self._redact(key, value) for key, value in event.items()}

    def _redact(self, key: str, value: Any) -> Any:
        if SENSITIVE_FIELD_PATTERN.search(key):
            if value is None:
                return None
            if self.preserve_length:
                return self.mask[0] * len(str(value))
            return self.mask
        if isinstance(value, dict):
            return self.apply(value)
        return value


class MessageLengthFilter(LogFilter):
    """Caps the length of the event message."""

    def __init__(self, max_length: int = 10000, suffix: str = "... [TRUNCATED]"):
        self.max_length = max_length
        self.suffix = suffix

    def apply(self, event: dict[str, Any]) -> dict[str, Any]:
        message = event.get("message")
        if not isinstance(message, str) or len(message) <= self.max_length:
            return event

        keep = max(self.max_length - len(self.suffix), 0)
        return {**event, "message": message[:keep] + self.suffix, "message_truncated": True}


# =====================================================================================
# LOGGER
# =====================================================================================

LIBRARY_LOGGER = "pwpolicy"

# Records stay silent until the host application attaches a handler
logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class StructuredLogger:
    """
    Level-gated, filtered front end to a structlog logger.

    Without an explicit config the logger follows whatever configure_logging()
    installed last. Before that it forwards events to the standard library
    logger of the same name, so the host's logging setup decides what is shown.
    """

    def __init__(self, name: str, config: LogConfig | None = None):
        self.name = name
        self._config = config
        self._logger: Any = None
        self._stdlib_logger = structlog.wrap_logger(
            logging.getLogger(name),
            processors=[merge_contextvars, structlog.stdlib.render_to_log_kwargs],
            wrapper_class=structlog.stdlib.BoundLogger,
        )
        self.emitted = 0

    @property
    def config(self) -> LogConfig | None:
        if self._config is not None:
            return self._config
        return _logger_factory.config if _logger_factory is not None else None

    @property
    def filters(self) -> list[LogFilter]:
        config = self.config or LogConfig()
        chain: list[LogFilter] = [MessageLengthFilter(config.max_message_length)]
        if config.mask_sensitive_fields:
            chain.insert(0, SensitiveDataFilter())
        return chain

    def debug(self, message: str, **fields: Any) -> None:
        self._emit(LogLevel.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._emit(LogLevel.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit(LogLevel.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit(LogLevel.ERROR, message, fields)

    def exception(self, message: str, **fields: Any) -> None:
        """Error with the active traceback attached."""
        self._emit(LogLevel.ERROR, message, {**fields, "exc_info": True})

    def is_enabled_for(self, level: LogLevel) -> bool:
        config = self.config
        if config is None:
            return logging.getLogger(self.name).isEnabledFor(level.priority)
        return level.priority >= config.level.priority

    def _backend(self) -> Any:
        if self._logger is not None:
            return self._logger
        if self.config is None:
            return self._stdlib_logger
        return structlog.get_logger(self.name)

    def _emit(self, level: LogLevel, message: str, fields: dict[str, Any]) -> None:
        if not self.is_enabled_for(level):
            return

        event: dict[str, Any] | None = {"message": message, **fields}
        for log_filter in self.filters:
            event = log_filter.apply(event)
            if event is None:
                return

        method = getattr(self._backend(), level.method_name)
        method(event.pop("message"), **event)
        self.emitted += 1


# =====================================================================================
# FACTORY
# =====================================================================================


_RENDERERS = {
    LogFormat.JSON: structlog.processors.JSONRenderer,
    LogFormat.CONSOLE: lambda: structlog.dev.ConsoleRenderer(colors=False),
    LogFormat.PLAIN: structlog.processors.KeyValueRenderer,
}


class LoggerFactory:
    """Configures structlog once and hands out cached loggers."""

    def __init__(self, config: LogConfig):
        self.config = config
        self._loggers: dict[str, StructuredLogger] = {}
        self._configured = False

    def processors(self) -> list[Any]:
        chain: list[Any] = [
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ]
        if self.config.include_timestamps:
            chain.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
        chain += [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _RENDERERS[self.config.format](),
        ]
        return chain

    def configure(self) -> None:
        if self._configured:
            return

        structlog.configure(
            processors=self.processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stdout)
        logging.getLogger(LIBRARY_LOGGER).setLevel(self.config.level.priority)
        self._configured = True

    def get_logger(self, name: str) -> StructuredLogger:
        """Logger pinned to this factory's config."""
        logger = self._loggers.get(name)
        if logger is None:
            logger = self._loggers[name] = StructuredLogger(name, self.config)
        return logger


# =====================================================================================
# MODULE-LEVEL ACCESS
# =====================================================================================

_logger_factory: LoggerFactory | None = None
_loggers: dict[str, StructuredLogger] = {}


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Install the process-wide logging configuration.

    Nothing is installed on import; applications opt in by calling this once
    at startup. Calling it again replaces the previous configuration, and
    loggers obtained through get_logger() follow the change.

    Args:
        config: Logging options; read from PWPOLICY_* settings when omitted
    """
    global _logger_factory  # noqa: PLW0603

    if config is None:
        from pwpolicy.core.config import get_settings

        settings = get_settings()
        config = LogConfig(
            level=settings.log_level,
            format=settings.log_format,
            environment=settings.environment,
        )

    _logger_factory = LoggerFactory(config)
    _logger_factory.configure()


def get_logger(name: str) -> StructuredLogger:
    """Logger for ``name`` that follows the active configuration."""
    logger = _loggers.get(name)
    if logger is None:
        logger = _loggers[name] = StructuredLogger(name)
    return logger


def log_context(**fields: Any) -> None:
    """Attach fields to every event logged from the current context."""
    bind_contextvars(**fields)


def clear_context() -> None:
    clear_contextvars()
