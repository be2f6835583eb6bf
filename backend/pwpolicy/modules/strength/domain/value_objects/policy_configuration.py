"""
Policy Configuration Value Object

Immutable snapshot of every option the strength evaluator consults.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any

from pwpolicy.core.errors import ConfigurationError

from ..constants import DEFAULT_KEYS_PER_SECOND, MAX_SCORE, MIN_SCORE
from ..enums import ComplexityTier
from .base import ValueObject


@dataclass(frozen=True)
class ScoreMultipliers(ValueObject):
    """Weights applied to each scoring contribution."""

    length: int = 4
    alpha: int = 2
    number: int = 2
    symbol: int = 2
    mid_number_or_symbol: int = 3
    consecutive_alpha_uc: int = 2
    consecutive_alpha_lc: int = 2
    consecutive_number: int = 2
    sequential_alpha: int = 2
    sequential_number: int = 2
    sequential_symbol: int = 2
    possible_word_and_number: int = 2
    repetition: int = 2

    def __post_init__(self) -> None:
        for multiplier in fields(self):
            value = getattr(self, multiplier.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"Multiplier '{multiplier.name}' must be an integer",
                    config_key=multiplier.name,
                )
            if value < 0:
                raise ConfigurationError(
                    f"Multiplier '{multiplier.name}' cannot be negative",
                    config_key=multiplier.name,
                )

    @classmethod
    def names(cls) -> list[str]:
        return [multiplier.name for multiplier in fields(cls)]


@dataclass(frozen=True)
class PolicyConfiguration(ValueObject):
    """
    Value object holding a password policy.

    Zero, False and None mean "not enforced" for every option except the
    minimum length, which is always checked (a minimum of 0 accepts every
    string). Built once, usually through PolicyBuilder, and shared freely
    between evaluations.
    """

    minimum_score: int = 0
    minimum_password_length: int = 0
    minimum_complexity: ComplexityTier | None = None

    alpha_uppercase_required: bool = False
    alpha_lowercase_required: bool = False
    number_required: bool = False
    symbol_required: bool = False
    mid_number_or_symbol_required: bool = False

    disallow_alphas_only: bool = False
    disallow_numbers_only: bool = False
    disallow_repeated_chars: bool = False
    disallow_consecutive_alpha_uc: bool = False
    disallow_consecutive_alpha_lc: bool = False
    disallow_consecutive_numbers: bool = False
    disallow_sequential_alphas: bool = False
    disallow_sequential_numbers: bool = False
    disallow_sequential_symbols: bool = False
    disallow_common_passwords: bool = False

    minimum_brute_force_seconds: int = 0
    brute_force_keys_per_second: int = DEFAULT_KEYS_PER_SECOND

    multipliers: ScoreMultipliers = field(default_factory=ScoreMultipliers)

    def __post_init__(self) -> None:
        """Validate option types, then ranges."""
        for option in fields(self):
            value = getattr(self, option.name)
            is_int = isinstance(value, int) and not isinstance(value, bool)
            if option.type is int and not is_int:
                raise ConfigurationError(
                    f"Option '{option.name}' must be an integer, got {value!r}",
                    config_key=option.name,
                )
            if option.type is bool and not isinstance(value, bool):
                raise ConfigurationError(
                    f"Option '{option.name}' must be a boolean, got {value!r}",
                    config_key=option.name,
                )

        if not MIN_SCORE <= self.minimum_score <= MAX_SCORE:
            raise ConfigurationError(
                f"Minimum score must be between {MIN_SCORE} and {MAX_SCORE}",
                config_key="minimum_score",
            )

        if self.minimum_password_length < 0:
            raise ConfigurationError(
                "Minimum password length cannot be negative",
                config_key="minimum_password_length",
            )

        if self.minimum_complexity is not None and not isinstance(
            self.minimum_complexity, ComplexityTier
        ):
            raise ConfigurationError(
                "Minimum complexity must be a ComplexityTier or None",
                config_key="minimum_complexity",
            )

        if self.minimum_brute_force_seconds < 0:
            raise ConfigurationError(
                "Minimum brute-force time cannot be negative",
                config_key="minimum_brute_force_seconds",
            )

        if self.brute_force_keys_per_second <= 0:
            raise ConfigurationError(
                "Brute-force keys per second must be positive",
                config_key="brute_force_keys_per_second",
            )

        if not isinstance(self.multipliers, ScoreMultipliers):
            raise ConfigurationError(
                "Multipliers must be a ScoreMultipliers instance",
                config_key="multipliers",
            )

    @property
    def enforces_brute_force_time(self) -> bool:
        return self.minimum_brute_force_seconds > 0

    def replace(self, **changes: Any) -> "PolicyConfiguration":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)
