"""
Policy Builder

Fluent construction of immutable PolicyConfiguration snapshots. Every setter
coerces its input the same way the policy options have always been coerced
(scores clamped, lengths floored at zero, times made non-negative) and
returns the builder, so options chain:

    policy = (
        PolicyBuilder()
        .minimum_password_length(10)
        .disallow_common_passwords()
        .minimum_complexity("strong")
        .build()
    )
"""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any

from pwpolicy.core.errors import ConfigurationError
from pwpolicy.core.logging import get_logger

from ..domain.constants import MAX_SCORE, MIN_SCORE
from ..domain.enums import ComplexityTier
from ..domain.value_objects import PolicyConfiguration, ScoreMultipliers

logger = get_logger(__name__)


def _to_int(value: Any, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"{key} must be an integer, got {value!r}", config_key=key, cause=e
        ) from e


class PolicyBuilder:
    """Mutable builder producing frozen PolicyConfiguration snapshots."""

    def __init__(self) -> None:
        defaults = PolicyConfiguration()
        self._options: dict[str, Any] = {
            f.name: getattr(defaults, f.name)
            for f in fields(PolicyConfiguration)
            if f.name != "multipliers"
        }
        self._multipliers: dict[str, int] = asdict(defaults.multipliers)

    @classmethod
    def from_policy(cls, policy: PolicyConfiguration) -> PolicyBuilder:
        """Start from an existing snapshot."""
        builder = cls()
        for name in builder._options:
            builder._options[name] = getattr(policy, name)
        builder._multipliers = asdict(policy.multipliers)
        return builder

    def get(self, option: str) -> Any:
        """Current value of an option."""
        if option == "multipliers":
            return ScoreMultipliers(**self._multipliers)
        if option not in self._options:
            raise ConfigurationError(f"Unknown policy option: {option}", config_key=option)
        return self._options[option]

    # =========================================================================
    # Thresholds
    # =========================================================================

    def minimum_score(self, score: int) -> PolicyBuilder:
        """Minimum total score, clamped to [0, 100]; 0 disables the check."""
        value = _to_int(score, "minimum_score")
        self._options["minimum_score"] = min(max(value, MIN_SCORE), MAX_SCORE)
        return self

    def minimum_password_length(self, length: int) -> PolicyBuilder:
        self._options["minimum_password_length"] = max(
            _to_int(length, "minimum_password_length"), 0
        )
        return self

    def minimum_complexity(
        self, complexity: ComplexityTier | str | bool | None
    ) -> PolicyBuilder:
        """
        Minimum complexity tier, by enum member or label.

        ``None`` or ``False`` disables the check; anything else that is not a
        known tier raises ConfigurationError.
        """
        if complexity is None or complexity is False:
            tier = None
        elif isinstance(complexity, ComplexityTier):
            tier = complexity
        elif isinstance(complexity, str):
            tier = ComplexityTier.from_label(complexity)
        else:
            raise ConfigurationError(
                "Complexity must be one of: "
                f"{', '.join(ComplexityTier.labels())}, or None to disable",
                config_key="minimum_complexity",
            )
        self._options["minimum_complexity"] = tier
        return self

    def minimum_brute_force_seconds(self, seconds: int) -> PolicyBuilder:
        """Minimum crack time; 0 disables the check and the score adjustment."""
        self._options["minimum_brute_force_seconds"] = abs(
            _to_int(seconds, "minimum_brute_force_seconds")
        )
        return self

    def brute_force_keys_per_second(self, keys_per_second: int) -> PolicyBuilder:
        self._options["brute_force_keys_per_second"] = abs(
            _to_int(keys_per_second, "brute_force_keys_per_second")
        )
        return self

    def multiplier(self, name: str, value: int) -> PolicyBuilder:
        """Override one scoring weight."""
        if name not in self._multipliers:
            raise ConfigurationError(
                f"Unknown multiplier '{name}'; expected one of "
                f"{', '.join(ScoreMultipliers.names())}",
                config_key=name,
            )
        self._multipliers[name] = _to_int(value, name)
        return self

    # =========================================================================
    # Requirements
    # =========================================================================

    def alpha_uppercase_required(self, required: bool = True) -> PolicyBuilder:
        return self._flag("alpha_uppercase_required", required)

    def alpha_lowercase_required(self, required: bool = True) -> PolicyBuilder:
        return self._flag("alpha_lowercase_required", required)

    def number_required(self, required: bool = True) -> PolicyBuilder:
        return self._flag("number_required", required)

    def symbol_required(self, required: bool = True) -> PolicyBuilder:
        return self._flag("symbol_required", required)

    def mid_number_or_symbol_required(self, required: bool = True) -> PolicyBuilder:
        return self._flag("mid_number_or_symbol_required", required)

    # =========================================================================
    # Prohibitions
    # =========================================================================

    def disallow_alphas_only(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_alphas_only", disallow)

    def disallow_numbers_only(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_numbers_only", disallow)

    def disallow_repeated_chars(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_repeated_chars", disallow)

    def disallow_consecutive_alpha_uc(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_consecutive_alpha_uc", disallow)

    def disallow_consecutive_alpha_lc(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_consecutive_alpha_lc", disallow)

    def disallow_consecutive_numbers(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_consecutive_numbers", disallow)

    def disallow_sequential_alphas(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_sequential_alphas", disallow)

    def disallow_sequential_numbers(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_sequential_numbers", disallow)

    def disallow_sequential_symbols(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_sequential_symbols", disallow)

    def disallow_common_passwords(self, disallow: bool = True) -> PolicyBuilder:
        return self._flag("disallow_common_passwords", disallow)

    def _flag(self, option: str, value: Any) -> PolicyBuilder:
        self._options[option] = bool(value)
        return self

    # =========================================================================
    # Snapshot
    # =========================================================================

    def build(self) -> PolicyConfiguration:
        """
        Freeze the current options.

        Raises:
            ConfigurationError: If keys per second is zero, or a value is out
                of range
        """
        if self._options["brute_force_keys_per_second"] == 0:
            raise ConfigurationError(
                "Brute-force keys per second must be greater than zero",
                config_key="brute_force_keys_per_second",
            )

        policy = PolicyConfiguration(
            **self._options, multipliers=ScoreMultipliers(**self._multipliers)
        )
        logger.debug(
            "Password policy built",
            minimum_score=policy.minimum_score,
            minimum_password_length=policy.minimum_password_length,
            minimum_complexity=(
                policy.minimum_complexity.label if policy.minimum_complexity else None
            ),
        )
        return policy
