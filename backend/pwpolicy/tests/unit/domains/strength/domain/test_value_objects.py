"""
Test cases for strength domain value objects.
"""

from dataclasses import FrozenInstanceError

import pytest

from pwpolicy.core.errors import ConfigurationError
from pwpolicy.modules.strength.domain.enums import ComplexityTier
from pwpolicy.modules.strength.domain.value_objects import (
    EvaluationResult,
    PolicyConfiguration,
    ScoreBreakdown,
    ScoreMultipliers,
    ValidationResult,
)

from ..conftest import ScoreMultipliersFactory


class TestPolicyConfiguration:
    """Test PolicyConfiguration validation."""

    def test_defaults(self, default_policy):
        assert default_policy.minimum_score == 0
        assert default_policy.minimum_password_length == 0
        assert default_policy.minimum_complexity is None
        assert default_policy.brute_force_keys_per_second == 4_000_000_000
        assert default_policy.enforces_brute_force_time is False

    @pytest.mark.parametrize(
        "options",
        [
            {"minimum_score": -1},
            {"minimum_score": 101},
            {"minimum_password_length": -1},
            {"minimum_complexity": "strong"},
            {"minimum_brute_force_seconds": -5},
            {"brute_force_keys_per_second": 0},
            {"multipliers": {"length": 4}},
            {"minimum_score": "50"},
            {"minimum_password_length": 8.5},
            {"minimum_brute_force_seconds": True},
            {"brute_force_keys_per_second": None},
            {"symbol_required": "yes"},
            {"disallow_common_passwords": 1},
        ],
    )
    def test_invalid_options(self, options):
        with pytest.raises(ConfigurationError):
            PolicyConfiguration(**options)

    def test_wrong_type_names_option(self):
        with pytest.raises(ConfigurationError) as exc_info:
            PolicyConfiguration(minimum_score="50")

        assert exc_info.value.details["config_key"] == "minimum_score"

    def test_replace(self, default_policy):
        changed = default_policy.replace(minimum_score=70)

        assert changed.minimum_score == 70
        assert default_policy.minimum_score == 0

    def test_replace_validates(self, default_policy):
        with pytest.raises(ConfigurationError):
            default_policy.replace(minimum_score=500)

    def test_frozen_and_hashable(self, policy_factory):
        policy = policy_factory()

        with pytest.raises(FrozenInstanceError):
            policy.minimum_score = 10
        assert hash(policy) == hash(policy.replace())

    def test_to_dict(self, policy_factory):
        data = policy_factory(minimum_complexity=ComplexityTier.GOOD).to_dict()

        assert data["minimum_complexity"] == "good"
        assert data["multipliers"]["length"] == 4


class TestScoreMultipliers:
    """Test ScoreMultipliers validation."""

    def test_names(self):
        assert ScoreMultipliers.names()[0] == "length"
        assert len(ScoreMultipliers.names()) == 13

    def test_factory_values_are_valid(self):
        multipliers = ScoreMultipliersFactory()

        assert 1 <= multipliers.length <= 6

    @pytest.mark.parametrize("value", [-1, True, 1.5, "2"])
    def test_invalid_weight(self, value):
        with pytest.raises(ConfigurationError):
            ScoreMultipliers(alpha=value)


class TestScoreBreakdownValue:
    """Test ScoreBreakdown as a mapping."""

    def test_total_and_score(self):
        breakdown = ScoreBreakdown({"length_bonus": 120, "repeat_chars": -4})

        assert breakdown.total == 116
        assert breakdown.score == 100
        assert breakdown.bonuses == {"length_bonus": 120}
        assert breakdown.penalties == {"repeat_chars": -4}

    def test_negative_total_clamps_to_zero(self):
        assert ScoreBreakdown({"common_password": -200}).score == 0

    def test_immutable(self):
        breakdown = ScoreBreakdown({"length_bonus": 4})

        with pytest.raises(AttributeError):
            breakdown.extra = 1
        with pytest.raises(TypeError):
            breakdown["length_bonus"] = 8

    def test_equality_respects_order_between_breakdowns(self):
        first = ScoreBreakdown({"a": 1, "b": 2})

        assert first == ScoreBreakdown({"a": 1, "b": 2})
        assert first != ScoreBreakdown({"b": 2, "a": 1})
        assert first == {"b": 2, "a": 1}
        assert hash(first) == hash(ScoreBreakdown({"a": 1, "b": 2}))


class TestValidationResultValue:
    """Test ValidationResult."""

    def test_success(self):
        result = ValidationResult.success()

        assert result.passed is True
        assert bool(result) is True
        assert result.describe() == []

    def test_failure(self):
        result = ValidationResult(("minimum_length", "number"))

        assert result.passed is False
        assert not result
        assert "number" in result
        assert result.has_failed("minimum_length")
        assert result.to_dict() == {
            "passed": False,
            "failed_checks": ["minimum_length", "number"],
        }

    def test_list_is_normalised_to_tuple(self):
        assert ValidationResult(["symbol"]).failed_checks == ("symbol",)

    def test_unknown_check(self):
        with pytest.raises(ValueError, match="Unknown validation checks"):
            ValidationResult(("too_short",))

    def test_duplicate_check(self):
        with pytest.raises(ValueError, match="unique"):
            ValidationResult(("symbol", "symbol"))


class TestEvaluationResultValue:
    """Test EvaluationResult validation."""

    def test_score_range(self):
        with pytest.raises(ValueError):
            EvaluationResult(
                breakdown=ScoreBreakdown(),
                score=101,
                complexity=ComplexityTier.VERY_STRONG,
                brute_force_seconds=0,
                validation=ValidationResult(),
            )

    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (5, "5 seconds"),
            (120, "2 minutes"),
            (7200, "2 hours"),
            (172800, "2 days"),
            (63072000, "2 years"),
        ],
    )
    def test_crack_time_human(self, seconds, expected):
        result = EvaluationResult(
            breakdown=ScoreBreakdown(),
            score=0,
            complexity=ComplexityTier.VERY_WEAK,
            brute_force_seconds=seconds,
            validation=ValidationResult(),
        )

        assert result.get_crack_time_human() == expected


class TestComplexityTier:
    """Test ComplexityTier lookups and ordering."""

    def test_ordering(self):
        assert ComplexityTier.VERY_WEAK < ComplexityTier.WEAK < ComplexityTier.GOOD
        assert ComplexityTier.VERY_STRONG >= ComplexityTier.STRONG

    @pytest.mark.parametrize("label", ["very strong", "VERY_STRONG", " Very Strong "])
    def test_from_label(self, label):
        assert ComplexityTier.from_label(label) is ComplexityTier.VERY_STRONG

    def test_from_label_unknown(self):
        with pytest.raises(ConfigurationError):
            ComplexityTier.from_label("unbreakable")

    def test_from_rank(self):
        assert ComplexityTier.from_rank(2) is ComplexityTier.GOOD
        with pytest.raises(ConfigurationError):
            ComplexityTier.from_rank(5)

    def test_labels(self):
        assert ComplexityTier.labels() == [
            "very weak",
            "weak",
            "good",
            "strong",
            "very strong",
        ]
        assert str(ComplexityTier.GOOD) == "good"
