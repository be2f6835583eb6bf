"""
pwpolicy

Configurable password strength evaluation. Scores a candidate password on a
0-100 scale, grades it into a complexity tier, estimates its brute-force
crack time and validates it against a policy of requirements and
prohibitions.

    from pwpolicy import PolicyBuilder, PasswordStrengthEvaluator

    policy = PolicyBuilder().minimum_password_length(10).build()
    evaluator = PasswordStrengthEvaluator(policy)
    evaluator.validate("1st \"GOOD\" Password!")
"""

from pwpolicy.core.errors import (
    ConfigurationError,
    PasswordPolicyError,
    ValidationError,
)
from pwpolicy.modules.strength import (
    CommonPasswordCatalogue,
    CommonPasswordLookup,
    ComplexityTier,
    EvaluationResult,
    PasswordStrengthEvaluator,
    PolicyBuilder,
    PolicyConfiguration,
    ScoreBreakdown,
    ScoreMultipliers,
    ValidationResult,
    evaluate,
    never_common,
)

__version__ = "1.0.0"

__all__ = [
    "CommonPasswordCatalogue",
    "CommonPasswordLookup",
    "ComplexityTier",
    "ConfigurationError",
    "EvaluationResult",
    "PasswordPolicyError",
    "PasswordStrengthEvaluator",
    "PolicyBuilder",
    "PolicyConfiguration",
    "ScoreBreakdown",
    "ScoreMultipliers",
    "ValidationError",
    "ValidationResult",
    "evaluate",
    "never_common",
]
