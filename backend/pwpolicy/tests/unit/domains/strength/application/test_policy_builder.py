"""
Test cases for PolicyBuilder.

Tests fluent chaining, input coercion and the frozen snapshots it builds.
"""

import random
from dataclasses import FrozenInstanceError

import pytest

from pwpolicy.core.errors import ConfigurationError
from pwpolicy.modules.strength.application import PolicyBuilder
from pwpolicy.modules.strength.domain.enums import ComplexityTier
from pwpolicy.modules.strength.domain.value_objects import PolicyConfiguration

FLAG_SETTERS = [
    "alpha_uppercase_required",
    "alpha_lowercase_required",
    "number_required",
    "symbol_required",
    "mid_number_or_symbol_required",
    "disallow_alphas_only",
    "disallow_numbers_only",
    "disallow_repeated_chars",
    "disallow_consecutive_alpha_uc",
    "disallow_consecutive_alpha_lc",
    "disallow_consecutive_numbers",
    "disallow_sequential_alphas",
    "disallow_sequential_numbers",
    "disallow_sequential_symbols",
    "disallow_common_passwords",
]


class TestThresholds:
    """Test coercion of numeric options."""

    def test_minimum_score_is_clamped(self):
        builder = PolicyBuilder()

        for value in random.sample(range(-200, 201), 10) + [-1, 0, 100, 101]:
            assert builder.minimum_score(value) is builder
            assert builder.get("minimum_score") == min(max(value, 0), 100)

    def test_minimum_password_length_floors_at_zero(self):
        builder = PolicyBuilder()

        for value in range(-20, 21):
            assert builder.minimum_password_length(value) is builder
            assert builder.get("minimum_password_length") == max(value, 0)

    def test_numeric_strings_are_coerced(self):
        policy = PolicyBuilder().minimum_score("42").minimum_password_length("8").build()

        assert policy.minimum_score == 42
        assert policy.minimum_password_length == 8

    def test_non_numeric_value_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            PolicyBuilder().minimum_score("lots")

        assert exc_info.value.details["config_key"] == "minimum_score"

    def test_brute_force_values_are_made_positive(self):
        builder = PolicyBuilder()

        for value in random.sample(range(0, 100_000_000), 10):
            assert builder.minimum_brute_force_seconds(value) is builder
            assert builder.get("minimum_brute_force_seconds") == value

        builder.minimum_brute_force_seconds(-60).brute_force_keys_per_second(-1000)

        assert builder.get("minimum_brute_force_seconds") == 60
        assert builder.get("brute_force_keys_per_second") == 1000

    def test_zero_keys_per_second_fails_on_build(self):
        builder = PolicyBuilder().brute_force_keys_per_second(0)

        with pytest.raises(ConfigurationError, match="greater than zero"):
            builder.build()


class TestComplexity:
    """Test the minimum complexity option."""

    @pytest.mark.parametrize("tier", list(ComplexityTier))
    def test_accepts_tiers_and_labels(self, tier):
        builder = PolicyBuilder()

        assert builder.minimum_complexity(tier).get("minimum_complexity") is tier
        assert builder.minimum_complexity(tier.label).get("minimum_complexity") is tier

    @pytest.mark.parametrize("disabled", [None, False])
    def test_disable(self, disabled):
        builder = PolicyBuilder().minimum_complexity("good")

        builder.minimum_complexity(disabled)

        assert builder.get("minimum_complexity") is None

    @pytest.mark.parametrize("invalid", ["not a valid complexity", True, 3, 2.5])
    def test_rejects_unknown_values(self, invalid):
        with pytest.raises(ConfigurationError):
            PolicyBuilder().minimum_complexity(invalid)


class TestFlags:
    """Test the boolean requirement and prohibition options."""

    @pytest.mark.parametrize("setter", FLAG_SETTERS)
    def test_toggle(self, setter):
        builder = PolicyBuilder()

        assert getattr(builder, setter)(True) is builder
        assert builder.get(setter) is True
        assert getattr(builder.build(), setter) is True

        assert getattr(builder, setter)(False) is builder
        assert builder.get(setter) is False

    @pytest.mark.parametrize("setter", FLAG_SETTERS)
    def test_enables_by_default(self, setter):
        builder = getattr(PolicyBuilder(), setter)()

        assert builder.get(setter) is True

    def test_truthy_values_are_coerced(self):
        builder = PolicyBuilder().number_required(1).symbol_required("")

        assert builder.get("number_required") is True
        assert builder.get("symbol_required") is False


class TestMultipliers:
    """Test overriding scoring weights."""

    def test_override(self):
        policy = PolicyBuilder().multiplier("length", 6).build()

        assert policy.multipliers.length == 6
        assert policy.multipliers.alpha == 2

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError, match="Unknown multiplier"):
            PolicyBuilder().multiplier("bogus", 1)

    def test_negative_weight_fails_on_build(self):
        builder = PolicyBuilder().multiplier("symbol", -1)

        with pytest.raises(ConfigurationError):
            builder.build()


class TestSnapshots:
    """Test the built configuration."""

    def test_defaults(self):
        assert PolicyBuilder().build() == PolicyConfiguration()

    def test_snapshot_is_frozen(self):
        policy = PolicyBuilder().minimum_password_length(10).build()

        with pytest.raises(FrozenInstanceError):
            policy.minimum_password_length = 1

    def test_later_changes_do_not_affect_built_policy(self):
        builder = PolicyBuilder().minimum_score(40)
        policy = builder.build()

        builder.minimum_score(90)

        assert policy.minimum_score == 40
        assert builder.build().minimum_score == 90

    def test_from_policy_round_trip(self, policy_factory):
        original = policy_factory(strict=True)

        rebuilt = PolicyBuilder.from_policy(original).build()

        assert rebuilt == original

    def test_fluent_chain(self):
        policy = (
            PolicyBuilder()
            .minimum_password_length(10)
            .disallow_common_passwords()
            .minimum_complexity("strong")
            .minimum_brute_force_seconds(3600)
            .build()
        )

        assert policy.minimum_password_length == 10
        assert policy.disallow_common_passwords is True
        assert policy.minimum_complexity is ComplexityTier.STRONG
        assert policy.enforces_brute_force_time is True

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError):
            PolicyBuilder().get("nonexistent")
