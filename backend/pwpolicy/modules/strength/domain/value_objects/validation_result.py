"""
Password Validation Result Value Object

Represents the outcome of validating a password against a policy.
"""

from dataclasses import dataclass
from typing import Any

from ..constants import CHECK_DESCRIPTIONS, VALIDATION_CHECKS
from .base import ValueObject


@dataclass(frozen=True)
class ValidationResult(ValueObject):
    """
    Value object representing a validation verdict.

    A result either passes (no failed checks) or carries the names of the
    failed checks in evaluation order. Truthiness follows ``passed``, so
    ``if policy_result:`` reads naturally.
    """

    failed_checks: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate check names and normalise to a tuple."""
        checks = tuple(self.failed_checks)
        unknown = [check for check in checks if check not in VALIDATION_CHECKS]
        if unknown:
            raise ValueError(f"Unknown validation checks: {', '.join(unknown)}")
        if len(set(checks)) != len(checks):
            raise ValueError("Failed checks must be unique")
        object.__setattr__(self, "failed_checks", checks)

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @property
    def passed(self) -> bool:
        return not self.failed_checks

    def __bool__(self) -> bool:
        return self.passed

    def __contains__(self, check: str) -> bool:
        return check in self.failed_checks

    def has_failed(self, check: str) -> bool:
        """Check whether a specific check failed."""
        return check in self.failed_checks

    def describe(self) -> list[str]:
        """Human-readable reason for each failed check."""
        return [CHECK_DESCRIPTIONS[check] for check in self.failed_checks]

    def to_dict(self) -> dict[str, Any]:
        return {"passed": self.passed, "failed_checks": list(self.failed_checks)}
