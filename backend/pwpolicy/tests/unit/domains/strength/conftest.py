"""
Strength module test configuration and shared fixtures.
Provides factories for policies and generated passwords.
"""

import factory
import pytest
from factory import fuzzy
from faker import Faker

from pwpolicy.modules.strength.domain.constants import DEFAULT_KEYS_PER_SECOND
from pwpolicy.modules.strength.domain.enums import ComplexityTier
from pwpolicy.modules.strength.domain.interfaces import never_common
from pwpolicy.modules.strength.domain.services import PasswordStrengthEvaluator
from pwpolicy.modules.strength.domain.value_objects import (
    PolicyConfiguration,
    ScoreMultipliers,
)
from pwpolicy.modules.strength.infrastructure import CommonPasswordCatalogue

fake = Faker()

SAMPLE_COMMON_PASSWORDS = ["password", "qwerty", "123456", "letmein", "dragon"]


# Test Factories using Factory Boy
class ScoreMultipliersFactory(factory.Factory):
    """Factory for creating test ScoreMultipliers."""

    class Meta:
        model = ScoreMultipliers

    length = fuzzy.FuzzyInteger(1, 6)
    alpha = fuzzy.FuzzyInteger(1, 4)
    number = fuzzy.FuzzyInteger(1, 4)
    symbol = fuzzy.FuzzyInteger(1, 4)
    mid_number_or_symbol = fuzzy.FuzzyInteger(1, 4)


class PolicyConfigurationFactory(factory.Factory):
    """Factory for creating test PolicyConfiguration snapshots."""

    class Meta:
        model = PolicyConfiguration

    minimum_score = 0
    minimum_password_length = fuzzy.FuzzyInteger(0, 16)
    minimum_complexity = None
    alpha_uppercase_required = False
    alpha_lowercase_required = False
    number_required = False
    symbol_required = False
    mid_number_or_symbol_required = False
    disallow_alphas_only = False
    disallow_numbers_only = False
    disallow_repeated_chars = False
    disallow_consecutive_alpha_uc = False
    disallow_consecutive_alpha_lc = False
    disallow_consecutive_numbers = False
    disallow_sequential_alphas = False
    disallow_sequential_numbers = False
    disallow_sequential_symbols = False
    disallow_common_passwords = False
    minimum_brute_force_seconds = 0
    brute_force_keys_per_second = DEFAULT_KEYS_PER_SECOND

    class Params:
        strict = factory.Trait(
            minimum_score=60,
            minimum_password_length=12,
            minimum_complexity=ComplexityTier.STRONG,
            alpha_uppercase_required=True,
            alpha_lowercase_required=True,
            number_required=True,
            symbol_required=True,
            disallow_common_passwords=True,
        )


def generate_password(length: int = 12) -> str:
    """Random password mixing every character class."""
    return fake.password(
        length=length,
        special_chars=True,
        digits=True,
        upper_case=True,
        lower_case=True,
    )


@pytest.fixture
def policy_factory():
    """Policy factory."""
    return PolicyConfigurationFactory


@pytest.fixture
def default_policy():
    """Policy with every option at its default."""
    return PolicyConfiguration()


@pytest.fixture
def evaluator(default_policy):
    """Evaluator with the default policy and no common-password lookup."""
    return PasswordStrengthEvaluator(default_policy, never_common)


@pytest.fixture
def sample_catalogue():
    """Small in-memory catalogue."""
    return CommonPasswordCatalogue(SAMPLE_COMMON_PASSWORDS, source="sample")


@pytest.fixture
def bundled_catalogue():
    """Catalogue shipped with the package."""
    return CommonPasswordCatalogue.default()


@pytest.fixture
def generated_passwords():
    """A batch of random passwords of varying lengths."""
    return [generate_password(length) for length in range(4, 40, 3)] + [
        fake.word(),
        fake.sentence(),
        fake.numerify("########"),
        fake.user_name(),
        "",
    ]
