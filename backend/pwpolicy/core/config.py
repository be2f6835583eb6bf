"""Application configuration management.

Loads pwpolicy settings from ``PWPOLICY_*`` environment variables (and an
optional ``.env`` file), converting and validating every value. The settings
object knows how to turn itself into an immutable policy snapshot and a
common-password catalogue; the scoring engine never reads the environment.

Architecture:
- EnvironmentLoader: Environment variable loading with type conversion
- Settings: All pwpolicy settings with defaults
- get_settings: Cached settings accessor
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING

from pwpolicy.core.enums import Environment, LogFormat, LogLevel
from pwpolicy.core.errors import ConfigurationError

if TYPE_CHECKING:
    from pwpolicy.modules.strength.domain.value_objects.policy_configuration import (
        PolicyConfiguration,
    )
    from pwpolicy.modules.strength.infrastructure.common_passwords import (
        CommonPasswordCatalogue,
    )

ENV_PREFIX = "PWPOLICY_"

_TRUE_VALUES = {"1", "true", "yes", "on", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", "f", ""}


class EnvironmentLoader:
    """
    Environment variable loader with type conversion and validation.

    Values already present in the process environment win over values read
    from the env file.
    """

    def __init__(self, env_file: str = ".env", prefix: str = ENV_PREFIX):
        """
        Initialize environment loader.

        Args:
            env_file: Optional environment file to load
            prefix: Prefix prepended to every key
        """
        self.env_file = env_file
        self.prefix = prefix
        self._file_values: dict[str, str] = {}
        self._load_env_file()

    def _load_env_file(self) -> None:
        """Load variables from the env file if it exists."""
        if not self.env_file or not os.path.exists(self.env_file):
            return

        try:
            with open(self.env_file, encoding="utf-8") as f:
                for raw_line in f:
                    line = raw_line.strip()

                    if not line or line.startswith("#") or "=" not in line:
                        continue

                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    self._file_values[key] = value
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load environment file {self.env_file}: {e}",
                config_key="env_file",
                cause=e,
            ) from e

    def _raw(self, key: str) -> str | None:
        full_key = f"{self.prefix}{key}"
        if full_key in os.environ:
            return os.environ[full_key]
        return self._file_values.get(full_key)

    def get_string(self, key: str, default: str | None = None) -> str | None:
        """Get string value."""
        value = self._raw(key)
        if value is None:
            return default
        value = value.strip()
        return value or default

    def get_integer(
        self, key: str, default: int | None = None, min_value: int | None = None
    ) -> int | None:
        """Get integer value, rejecting values below ``min_value``."""
        value = self._raw(key)
        if value is None or not value.strip():
            return default

        try:
            result = int(value.strip())
        except ValueError as e:
            raise ConfigurationError(
                f"{self.prefix}{key} must be an integer, got {value!r}",
                config_key=key,
                cause=e,
            ) from e

        if min_value is not None and result < min_value:
            raise ConfigurationError(
                f"{self.prefix}{key} must be at least {min_value}, got {result}",
                config_key=key,
            )
        return result

    def get_boolean(self, key: str, default: bool = False) -> bool:
        """Get boolean value."""
        value = self._raw(key)
        if value is None:
            return default

        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(
            f"{self.prefix}{key} must be a boolean, got {value!r}", config_key=key
        )

    def get_enum(self, key: str, enum_class: type[Enum], default: Enum) -> Enum:
        """Get enum value by value or member name."""
        value = self._raw(key)
        if value is None or not value.strip():
            return default

        normalized = value.strip()
        for member in enum_class:
            if normalized.lower() in (str(member.value).lower(), member.name.lower()):
                return member

        raise ConfigurationError(
            f"{self.prefix}{key} must be one of "
            f"{', '.join(m.name.lower() for m in enum_class)}, got {value!r}",
            config_key=key,
        )


# =====================================================================================
# SETTINGS
# =====================================================================================


@dataclass
class Settings:
    """All pwpolicy settings with their defaults."""

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    log_format: LogFormat = LogFormat.JSON

    minimum_score: int = 0
    minimum_password_length: int = 0
    minimum_complexity: str | None = None
    require_uppercase: bool = False
    require_lowercase: bool = False
    require_number: bool = False
    require_symbol: bool = False
    require_mid_number_or_symbol: bool = False
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
    brute_force_keys_per_second: int = 4_000_000_000
    common_passwords_file: str | None = None
    # Only weights set in the environment; the rest keep their defaults
    multipliers: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_environment(cls, loader: EnvironmentLoader | None = None) -> "Settings":
        """Build settings from ``PWPOLICY_*`` variables."""
        env = loader or EnvironmentLoader()
        defaults = cls()
        multipliers = read_multipliers(env)

        return cls(
            environment=env.get_enum("ENVIRONMENT", Environment, defaults.environment),
            log_level=env.get_enum("LOG_LEVEL", LogLevel, defaults.log_level),
            log_format=env.get_enum("LOG_FORMAT", LogFormat, defaults.log_format),
            minimum_score=env.get_integer("MINIMUM_SCORE", defaults.minimum_score),
            minimum_password_length=env.get_integer(
                "MINIMUM_PASSWORD_LENGTH", defaults.minimum_password_length, min_value=0
            ),
            minimum_complexity=env.get_string("MINIMUM_COMPLEXITY"),
            require_uppercase=env.get_boolean("REQUIRE_UPPERCASE"),
            require_lowercase=env.get_boolean("REQUIRE_LOWERCASE"),
            require_number=env.get_boolean("REQUIRE_NUMBER"),
            require_symbol=env.get_boolean("REQUIRE_SYMBOL"),
            require_mid_number_or_symbol=env.get_boolean(
                "REQUIRE_MID_NUMBER_OR_SYMBOL"
            ),
            disallow_alphas_only=env.get_boolean("DISALLOW_ALPHAS_ONLY"),
            disallow_numbers_only=env.get_boolean("DISALLOW_NUMBERS_ONLY"),
            disallow_repeated_chars=env.get_boolean("DISALLOW_REPEATED_CHARS"),
            disallow_consecutive_alpha_uc=env.get_boolean(
                "DISALLOW_CONSECUTIVE_ALPHA_UC"
            ),
            disallow_consecutive_alpha_lc=env.get_boolean(
                "DISALLOW_CONSECUTIVE_ALPHA_LC"
            ),
            disallow_consecutive_numbers=env.get_boolean(
                "DISALLOW_CONSECUTIVE_NUMBERS"
            ),
            disallow_sequential_alphas=env.get_boolean("DISALLOW_SEQUENTIAL_ALPHAS"),
            disallow_sequential_numbers=env.get_boolean("DISALLOW_SEQUENTIAL_NUMBERS"),
            disallow_sequential_symbols=env.get_boolean("DISALLOW_SEQUENTIAL_SYMBOLS"),
            disallow_common_passwords=env.get_boolean("DISALLOW_COMMON_PASSWORDS"),
            minimum_brute_force_seconds=env.get_integer(
                "MINIMUM_BRUTE_FORCE_SECONDS", defaults.minimum_brute_force_seconds
            ),
            brute_force_keys_per_second=env.get_integer(
                "BRUTE_FORCE_KEYS_PER_SECOND", defaults.brute_force_keys_per_second
            ),
            common_passwords_file=env.get_string("COMMON_PASSWORDS_FILE"),
            multipliers=multipliers,
        )

    def build_policy(self) -> "PolicyConfiguration":
        """Build the immutable policy described by these settings."""
        from pwpolicy.modules.strength.application.policy_builder import PolicyBuilder

        builder = (
            PolicyBuilder()
            .minimum_score(self.minimum_score)
            .minimum_password_length(self.minimum_password_length)
            .minimum_complexity(self.minimum_complexity)
            .alpha_uppercase_required(self.require_uppercase)
            .alpha_lowercase_required(self.require_lowercase)
            .number_required(self.require_number)
            .symbol_required(self.require_symbol)
            .mid_number_or_symbol_required(self.require_mid_number_or_symbol)
            .disallow_alphas_only(self.disallow_alphas_only)
            .disallow_numbers_only(self.disallow_numbers_only)
            .disallow_repeated_chars(self.disallow_repeated_chars)
            .disallow_consecutive_alpha_uc(self.disallow_consecutive_alpha_uc)
            .disallow_consecutive_alpha_lc(self.disallow_consecutive_alpha_lc)
            .disallow_consecutive_numbers(self.disallow_consecutive_numbers)
            .disallow_sequential_alphas(self.disallow_sequential_alphas)
            .disallow_sequential_numbers(self.disallow_sequential_numbers)
            .disallow_sequential_symbols(self.disallow_sequential_symbols)
            .disallow_common_passwords(self.disallow_common_passwords)
            .minimum_brute_force_seconds(self.minimum_brute_force_seconds)
            .brute_force_keys_per_second(self.brute_force_keys_per_second)
        )
        for name, value in self.multipliers.items():
            builder.multiplier(name, value)
        return builder.build()

    def build_catalogue(self) -> "CommonPasswordCatalogue":
        """Load the configured common-password list, or the bundled one."""
        from pwpolicy.modules.strength.infrastructure.common_passwords import (
            CommonPasswordCatalogue,
        )

        if self.common_passwords_file:
            return CommonPasswordCatalogue.from_file(self.common_passwords_file)
        return CommonPasswordCatalogue.default()


def read_multipliers(env: EnvironmentLoader) -> dict[str, int]:
    """Collect the ``PWPOLICY_MULTIPLIER_<NAME>`` weights that are set."""
    from pwpolicy.modules.strength.domain.value_objects.policy_configuration import (
        ScoreMultipliers,
    )

    multipliers = {}
    for name in ScoreMultipliers.names():
        value = env.get_integer(f"MULTIPLIER_{name.upper()}", min_value=0)
        if value is not None:
            multipliers[name] = value
    return multipliers


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, loaded once."""
    return Settings.from_environment()


__all__ = [
    "EnvironmentLoader",
    "Settings",
    "get_settings",
    "read_multipliers",
]
