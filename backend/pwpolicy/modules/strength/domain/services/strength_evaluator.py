"""
Password Strength Evaluator

Scores, grades and validates passwords against a PolicyConfiguration.
The evaluator holds no state besides its policy and its common-password
lookup, so one instance can serve any number of concurrent evaluations.
"""

from __future__ import annotations

from pwpolicy.core.errors import ValidationError
from pwpolicy.core.logging import get_logger

from .. import constants as c
from ..constants import Check, Contribution
from ..enums import ComplexityTier
from ..interfaces import CommonPasswordLookup, never_common
from ..value_objects import (
    EvaluationResult,
    PolicyConfiguration,
    ScoreBreakdown,
    ValidationResult,
)
from . import character_analyzer as analyzer

logger = get_logger(__name__)


class PasswordStrengthEvaluator:
    """Domain service combining character analysis with a policy."""

    def __init__(
        self,
        policy: PolicyConfiguration | None = None,
        common_passwords: CommonPasswordLookup | None = None,
    ) -> None:
        self._policy = policy if policy is not None else PolicyConfiguration()
        self._common_passwords = (
            common_passwords if common_passwords is not None else never_common
        )

    @property
    def policy(self) -> PolicyConfiguration:
        return self._policy

    def with_policy(self, policy: PolicyConfiguration) -> PasswordStrengthEvaluator:
        """Return an evaluator sharing this lookup but using another policy."""
        return PasswordStrengthEvaluator(policy, self._common_passwords)

    # =========================================================================
    # Simple checks
    # =========================================================================

    def is_common_password(self, password: str) -> bool:
        """True if the lookup reports the password as common."""
        return bool(self._common_passwords(_require_str(password)))

    def has_minimum_required_length(self, password: str) -> bool:
        return len(_require_str(password)) >= self._policy.minimum_password_length

    def has_minimum_complexity(
        self, minimum: ComplexityTier | str, password: str
    ) -> bool:
        """True if the password's tier is at least ``minimum``."""
        if not isinstance(minimum, ComplexityTier):
            minimum = ComplexityTier.from_label(minimum)
        return self.get_complexity(password) >= minimum

    # =========================================================================
    # Scoring
    # =========================================================================

    def get_score_breakdown(self, password: str) -> ScoreBreakdown:
        """Itemized contributions to the password's score."""
        password = _require_str(password)
        return self._build_breakdown(password, self.is_common_password(password))

    def get_score(self, password: str) -> int:
        """Sum of the breakdown, clamped to [0, 100]."""
        return self.get_score_breakdown(password).score

    def get_complexity(self, password: str) -> ComplexityTier:
        """Tier of the password's score, regardless of the policy minimum."""
        return ComplexityTier.from_score(self.get_score(password))

    def get_brute_force_time_in_seconds(self, password: str) -> int:
        """
        Seconds needed to exhaust the key space implied by the password.

        The key space is the sum of the sizes of the character classes
        present, raised to the password length; the result is floored.
        """
        password = _require_str(password)
        if not password:
            return 0

        space = 0
        if analyzer.has_alpha_lowercase(password):
            space += c.ALPHA_SPACE
        if analyzer.has_alpha_uppercase(password):
            space += c.ALPHA_SPACE
        if analyzer.has_symbol_in_alphabet(password):
            space += c.SYMBOL_SPACE
        if analyzer.has_number(password):
            space += c.NUMBER_SPACE

        return space ** len(password) // self._policy.brute_force_keys_per_second

    def _build_breakdown(self, password: str, is_common: bool) -> ScoreBreakdown:
        policy = self._policy
        weights = policy.multipliers
        length = len(password)
        breakdown: dict[str, int] = {}

        breakdown[Contribution.COMMON_PASSWORD] = (
            c.COMMON_PASSWORD_PENALTY if is_common else 0
        )
        breakdown[Contribution.MINIMUM_LENGTH] = (
            c.MINIMUM_LENGTH_BONUS
            if policy.minimum_password_length
            and length >= policy.minimum_password_length
            else 0
        )
        breakdown[Contribution.LENGTH_BONUS] = length * weights.length

        uppercase = analyzer.count_in_alphabet(password, c.ALPHAS_UC)
        lowercase = analyzer.count_in_alphabet(password, c.ALPHAS_LC)
        numbers = analyzer.count_in_alphabet(password, c.NUMBERS)
        symbols = analyzer.count_in_alphabet(password, c.SYMBOL_SET)

        # Bonuses for mixing character classes
        if 0 < uppercase < length:
            breakdown[Contribution.ALPHA_UC] = (length - uppercase) * weights.alpha
        if 0 < lowercase < length:
            breakdown[Contribution.ALPHA_LC] = (length - lowercase) * weights.alpha
        if 0 < numbers < length:
            breakdown[Contribution.NUMBER] = numbers * weights.number
        if 0 < symbols < length:
            breakdown[Contribution.SYMBOL] = symbols * weights.symbol

        mid = analyzer.count_mid_numbers_or_symbols(password)
        if mid > 0:
            breakdown[Contribution.MID_NUMBER_OR_SYMBOL] = (
                mid * weights.mid_number_or_symbol
            )

        # Deductions for poor practices
        if analyzer.has_possible_word_and_number(password):
            breakdown[Contribution.POSSIBLE_WORD_AND_NUMBER] = (
                -length * weights.possible_word_and_number
            )

        if (lowercase or uppercase) and not symbols and not numbers:
            breakdown[Contribution.ALPHAS_ONLY] = -length * weights.alpha

        if not lowercase and not uppercase and not symbols and numbers:
            breakdown[Contribution.NUMBERS_ONLY] = -length * weights.number

        repeated = analyzer.count_repeated_chars(password)
        if repeated > 0:
            breakdown[Contribution.REPEAT_CHARS] = -repeated * weights.repetition

        for name, alphabet, weight in (
            (Contribution.CONSECUTIVE_ALPHA_UC, c.ALPHAS_UC, weights.consecutive_alpha_uc),
            (Contribution.CONSECUTIVE_ALPHA_LC, c.ALPHAS_LC, weights.consecutive_alpha_lc),
            (Contribution.CONSECUTIVE_NUMBERS, c.NUMBERS, weights.consecutive_number),
        ):
            consecutive = analyzer.count_consecutive_chars(password, alphabet)
            if consecutive > 0:
                breakdown[name] = -consecutive * weight

        for name, count, weight in (
            (
                Contribution.SEQUENTIAL_ALPHA,
                analyzer.count_sequential_alphas(password),
                weights.sequential_alpha,
            ),
            (
                Contribution.SEQUENTIAL_NUMBER,
                analyzer.count_sequential_numbers(password),
                weights.sequential_number,
            ),
            (
                Contribution.SEQUENTIAL_SYMBOL,
                analyzer.count_sequential_symbols(password),
                weights.sequential_symbol,
            ),
        ):
            if count > 0:
                breakdown[name] = -count * weight

        if policy.enforces_brute_force_time:
            crack_time = self.get_brute_force_time_in_seconds(password)
            breakdown[Contribution.BRUTE_FORCE_TIME] = (
                c.BRUTE_FORCE_BONUS
                if crack_time >= policy.minimum_brute_force_seconds
                else -c.BRUTE_FORCE_BONUS
            )

        return ScoreBreakdown(breakdown)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, password: str) -> ValidationResult:
        """
        Run every check enabled by the policy.

        Checks never short-circuit; the result lists the failed ones in
        VALIDATION_CHECKS order, or passes when none failed.
        """
        password = _require_str(password)
        result = self._validate(password, _Memo(password, self))

        logger.debug(
            "Password validated",
            length=len(password),
            passed=result.passed,
            failed_checks=list(result.failed_checks),
        )
        return result

    def evaluate(self, password: str) -> EvaluationResult:
        """Compute breakdown, score, tier, crack time and verdict at once."""
        password = _require_str(password)
        breakdown = self._build_breakdown(password, self.is_common_password(password))
        memo = _Memo(password, self, breakdown)

        result = EvaluationResult(
            breakdown=breakdown,
            score=breakdown.score,
            complexity=ComplexityTier.from_score(breakdown.score),
            brute_force_seconds=self.get_brute_force_time_in_seconds(password),
            validation=self._validate(password, memo),
        )

        logger.debug(
            "Password evaluated",
            length=len(password),
            score=result.score,
            complexity=result.complexity.label,
            passed=result.passed,
            failed_checks=list(result.validation.failed_checks),
        )
        return result

    def _validate(self, password: str, memo: _Memo) -> ValidationResult:
        policy = self._policy

        failed = {
            Check.COMMON_PASSWORD: policy.disallow_common_passwords
            and memo.is_common,
            Check.MINIMUM_LENGTH: len(password) < policy.minimum_password_length,
            Check.ALPHA_LC: policy.alpha_lowercase_required
            and not analyzer.has_alpha_lowercase(password),
            Check.ALPHA_UC: policy.alpha_uppercase_required
            and not analyzer.has_alpha_uppercase(password),
            Check.ALPHAS_ONLY: policy.disallow_alphas_only
            and analyzer.has_alphas_only(password),
            Check.NUMBERS_ONLY: policy.disallow_numbers_only
            and analyzer.has_numbers_only(password),
            Check.CONSECUTIVE_ALPHA_LC: policy.disallow_consecutive_alpha_lc
            and analyzer.has_consecutive_alpha_lc(password),
            Check.CONSECUTIVE_ALPHA_UC: policy.disallow_consecutive_alpha_uc
            and analyzer.has_consecutive_alpha_uc(password),
            Check.CONSECUTIVE_NUMBERS: policy.disallow_consecutive_numbers
            and analyzer.has_consecutive_numbers(password),
            Check.MID_NUMBER_OR_SYMBOL: policy.mid_number_or_symbol_required
            and not analyzer.has_mid_number_or_symbol(password),
            Check.NUMBER: policy.number_required and not analyzer.has_number(password),
            Check.SYMBOL: policy.symbol_required and not analyzer.has_symbol(password),
            Check.REPEAT_CHARS: policy.disallow_repeated_chars
            and analyzer.has_repeated_chars(password),
            Check.SEQUENTIAL_ALPHA: policy.disallow_sequential_alphas
            and analyzer.has_sequential_alphas(password),
            Check.SEQUENTIAL_NUMBER: policy.disallow_sequential_numbers
            and analyzer.has_sequential_numbers(password),
            Check.SEQUENTIAL_SYMBOL: policy.disallow_sequential_symbols
            and analyzer.has_sequential_symbols(password),
            Check.COMPLEXITY: policy.minimum_complexity is not None
            and ComplexityTier.from_score(memo.score) < policy.minimum_complexity,
            Check.BRUTE_FORCE_TIME: policy.enforces_brute_force_time
            and self.get_brute_force_time_in_seconds(password)
            < policy.minimum_brute_force_seconds,
            Check.MINIMUM_SCORE: bool(policy.minimum_score)
            and memo.score < policy.minimum_score,
        }

        return ValidationResult(
            tuple(check for check in c.VALIDATION_CHECKS if failed[check])
        )


class _Memo:
    """Per-call cache so the lookup and the breakdown run at most once."""

    def __init__(
        self,
        password: str,
        evaluator: PasswordStrengthEvaluator,
        breakdown: ScoreBreakdown | None = None,
    ) -> None:
        self._password = password
        self._evaluator = evaluator
        self._breakdown = breakdown
        self._is_common: bool | None = (
            breakdown[Contribution.COMMON_PASSWORD] != 0
            if breakdown is not None
            else None
        )

    @property
    def is_common(self) -> bool:
        if self._is_common is None:
            self._is_common = self._evaluator.is_common_password(self._password)
        return self._is_common

    @property
    def score(self) -> int:
        if self._breakdown is None:
            self._breakdown = self._evaluator._build_breakdown(
                self._password, self.is_common
            )
        return self._breakdown.score


def _require_str(password: str) -> str:
    if not isinstance(password, str):
        raise ValidationError(
            f"Password must be a string, got {type(password).__name__}",
            field="password",
        )
    return password


def evaluate(
    password: str,
    policy: PolicyConfiguration | None = None,
    common_passwords: CommonPasswordLookup | None = None,
) -> EvaluationResult:
    """Evaluate one password without keeping an evaluator around."""
    return PasswordStrengthEvaluator(policy, common_passwords).evaluate(password)
