"""
Strength Module

Password strength scoring, grading and policy validation.
"""

from .application import PolicyBuilder
from .domain import (
    CommonPasswordLookup,
    ComplexityTier,
    EvaluationResult,
    PasswordStrengthEvaluator,
    PolicyConfiguration,
    ScoreBreakdown,
    ScoreMultipliers,
    ValidationResult,
    evaluate,
    never_common,
)
from .infrastructure import CommonPasswordCatalogue

__all__ = [
    "CommonPasswordCatalogue",
    "CommonPasswordLookup",
    "ComplexityTier",
    "EvaluationResult",
    "PasswordStrengthEvaluator",
    "PolicyBuilder",
    "PolicyConfiguration",
    "ScoreBreakdown",
    "ScoreMultipliers",
    "ValidationResult",
    "evaluate",
    "never_common",
]
