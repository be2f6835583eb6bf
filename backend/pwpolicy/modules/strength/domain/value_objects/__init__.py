"""
Strength Domain Value Objects
"""

from .base import ValueObject
from .evaluation_result import EvaluationResult
from .policy_configuration import PolicyConfiguration, ScoreMultipliers
from .score_breakdown import ScoreBreakdown
from .validation_result import ValidationResult

__all__ = [
    "EvaluationResult",
    "PolicyConfiguration",
    "ScoreBreakdown",
    "ScoreMultipliers",
    "ValidationResult",
    "ValueObject",
]
