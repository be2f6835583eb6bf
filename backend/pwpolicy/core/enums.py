"""Runtime enums for the logging and settings layers.

Domain enums (complexity tiers) live with the strength module.
"""

import logging
from enum import Enum


class Environment(Enum):
    """Where pwpolicy is running; selected by PWPOLICY_ENVIRONMENT."""

    DEVELOPMENT = "dev"
    TESTING = "test"
    STAGING = "staging"
    PRODUCTION = "prod"

    @property
    def allows_debug_logging(self) -> bool:
        """True for the local development and test environments."""
        return self in (Environment.DEVELOPMENT, Environment.TESTING)


class LogLevel(Enum):
    """Log levels, ordered by their standard library priority."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @property
    def priority(self) -> int:
        return self.value

    @property
    def method_name(self) -> str:
        """Name of the logger method emitting at this level."""
        return self.name.lower()


class LogFormat(Enum):
    """Renderer used for log output."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"
