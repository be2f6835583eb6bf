"""
Strength Domain Services
"""

from . import character_analyzer
from .strength_evaluator import PasswordStrengthEvaluator, evaluate

__all__ = [
    "PasswordStrengthEvaluator",
    "character_analyzer",
    "evaluate",
]
