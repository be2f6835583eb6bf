"""
Strength Domain

Character analysis, scoring and validation of candidate passwords.
"""

from .enums import ComplexityTier
from .interfaces import CommonPasswordLookup, never_common
from .services import PasswordStrengthEvaluator, character_analyzer, evaluate
from .value_objects import (
    EvaluationResult,
    PolicyConfiguration,
    ScoreBreakdown,
    ScoreMultipliers,
    ValidationResult,
)

__all__ = [
    "CommonPasswordLookup",
    "ComplexityTier",
    "EvaluationResult",
    "PasswordStrengthEvaluator",
    "PolicyConfiguration",
    "ScoreBreakdown",
    "ScoreMultipliers",
    "ValidationResult",
    "character_analyzer",
    "evaluate",
    "never_common",
]
