"""
Evaluation Result Value Object

Everything the evaluator computes for one password.
"""

from dataclasses import dataclass

from ..enums import ComplexityTier
from .base import ValueObject
from .score_breakdown import ScoreBreakdown
from .validation_result import ValidationResult


@dataclass(frozen=True)
class EvaluationResult(ValueObject):
    """Score breakdown, score, tier, crack time estimate and verdict."""

    breakdown: ScoreBreakdown
    score: int
    complexity: ComplexityTier
    brute_force_seconds: int
    validation: ValidationResult

    def __post_init__(self) -> None:
        if not 0 <= self.score <= 100:
            raise ValueError("Score must be between 0 and 100")

        if self.brute_force_seconds < 0:
            raise ValueError("Brute-force time cannot be negative")

    @property
    def passed(self) -> bool:
        return self.validation.passed

    def get_crack_time_human(self) -> str:
        """Get human-readable crack time estimate."""
        seconds = self.brute_force_seconds

        if seconds < 60:
            return f"{seconds} seconds"
        if seconds < 3600:
            return f"{seconds // 60} minutes"
        if seconds < 86400:
            return f"{seconds // 3600} hours"
        if seconds < 31536000:
            return f"{seconds // 86400} days"
        return f"{seconds // 31536000} years"
