"""
Exception hierarchy for pwpolicy.

Failing a password policy is not an error: validation outcomes are returned as
data. The exceptions here cover misuse of the library, such as an impossible
policy option or an unreadable common-password catalogue.

Every error reports itself to the standard library logger
``pwpolicy.errors.<ClassName>`` when it is created, at a level derived from
its severity. Detail entries whose keys look secret are redacted both in that
log record and in ``to_dict()``.
"""

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any

REDACTED = "***REDACTED***"

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "passwd",
        "candidate",
        "token",
        "secret",
        "api_key",
        "credential",
        "authorization",
    }
)


class ErrorSeverity(Enum):
    """How loudly an error is reported."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def is_sensitive_key(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in SENSITIVE_KEYS)


def redact(details: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``details`` with secret-looking values replaced, at any depth."""
    cleaned: dict[str, Any] = {}
    for key, value in details.items():
        if is_sensitive_key(key):
            cleaned[key] = REDACTED
        elif isinstance(value, dict):
            cleaned[key] = redact(value)
        else:
            cleaned[key] = value
    return cleaned


class PasswordPolicyError(Exception):
    """
    Base class for every exception raised by pwpolicy.

    Args:
        message: Text for developers and logs
        details: Structured context; keys starting with ``_`` stay internal
        user_message: Text safe to show an end user, defaults to ``message``
        recovery_hint: What the caller can change to avoid the error
        cause: Underlying exception, chained as ``__cause__``
    """

    code = "ERROR"
    severity = ErrorSeverity.MEDIUM

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        user_message: str | None = None,
        recovery_hint: str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        self.user_message = user_message or message
        self.recovery_hint = recovery_hint
        self.error_id = str(uuid.uuid4())
        self.timestamp = datetime.now(timezone.utc)
        if cause is not None:
            self.__cause__ = cause

        self._report()

    def _report(self) -> None:
        logger = logging.getLogger(f"pwpolicy.errors.{type(self).__name__}")
        logger.log(
            self.severity.log_level,
            "%s raised: %s",
            self.code,
            self.message,
            extra={
                "error_id": self.error_id,
                "code": self.code,
                "severity": self.severity.value,
                "details": redact(self.details),
            },
        )

    def to_dict(
        self, include_details: bool = True, include_internal: bool = False
    ) -> dict[str, Any]:
        """Serializable view of the error for API-style responses."""
        data: dict[str, Any] = {
            "error": self.code,
            "message": self.user_message,
            "timestamp": self.timestamp.isoformat(),
        }

        if include_details:
            public = {
                key: value
                for key, value in redact(self.details).items()
                if not key.startswith("_")
            }
            if public:
                data["details"] = public

        if self.recovery_hint:
            data["recovery_hint"] = self.recovery_hint

        if include_internal:
            data.update(
                error_id=self.error_id,
                severity=self.severity.value,
                internal_message=self.message,
            )

        return data

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ValidationError(PasswordPolicyError):
    """An argument handed to the library has the wrong shape."""

    code = "VALIDATION_ERROR"
    severity = ErrorSeverity.LOW

    def __init__(self, message: str, field: str | None = None, **kwargs: Any):
        if field:
            kwargs["details"] = {**(kwargs.get("details") or {}), "field": field}
        super().__init__(message, **kwargs)


class ConfigurationError(PasswordPolicyError):
    """A policy option, setting or catalogue cannot be used as given."""

    code = "CONFIGURATION_ERROR"
    severity = ErrorSeverity.HIGH

    def __init__(self, message: str, config_key: str | None = None, **kwargs: Any):
        if config_key:
            kwargs["details"] = {**(kwargs.get("details") or {}), "config_key": config_key}
        super().__init__(message, **kwargs)
