"""
Strength Domain Constants

Character alphabets, sequence stacks and the fixed vocabularies used by the
score breakdown and the validation checks.
"""

import string

# =============================================================================
# Character classes
# =============================================================================

ALPHAS_LC = string.ascii_lowercase
ALPHAS_UC = string.ascii_uppercase
NUMBERS = string.digits

# Symbol layout (Dutch-Belgian keyboard row followed by ASCII punctuation).
# Order matters: it is the stack for sequential symbol detection.
SYMBOLS = "²&é\"'(§è!çà)-!\"#$%&'()*+,-./<=>?@[\\]^_{|}~,;:=?./+|@#{[^{}[]^$´`"
SYMBOL_SET = frozenset(SYMBOLS)

# Stacks for sequential run detection. The digit stack wraps so that
# "890" and "098" count as sequential.
ALPHA_SEQUENCE = ALPHAS_LC
NUMBER_SEQUENCE = NUMBERS + "0"
SYMBOL_SEQUENCE = SYMBOLS

SEQUENCE_WINDOW = 3

# Character space sizes used by the brute-force estimate
ALPHA_SPACE = len(ALPHAS_LC)
NUMBER_SPACE = len(NUMBERS)
SYMBOL_SPACE = len(SYMBOL_SET)

# =============================================================================
# Scoring
# =============================================================================

MIN_SCORE = 0
MAX_SCORE = 100

COMMON_PASSWORD_PENALTY = -200
MINIMUM_LENGTH_BONUS = 2
BRUTE_FORCE_BONUS = 50

DEFAULT_KEYS_PER_SECOND = 4_000_000_000


class Contribution:
    """Score breakdown entry names."""

    COMMON_PASSWORD = "common_password"
    MINIMUM_LENGTH = "minimum_length"
    LENGTH_BONUS = "length_bonus"
    ALPHA_UC = "alpha_uc"
    ALPHA_LC = "alpha_lc"
    NUMBER = "number"
    SYMBOL = "symbol"
    MID_NUMBER_OR_SYMBOL = "mid_number_or_symbol"
    POSSIBLE_WORD_AND_NUMBER = "possible_word_and_number"
    ALPHAS_ONLY = "alphas_only"
    NUMBERS_ONLY = "numbers_only"
    REPEAT_CHARS = "repeat_chars"
    CONSECUTIVE_ALPHA_UC = "consecutive_alpha_uc"
    CONSECUTIVE_ALPHA_LC = "consecutive_alpha_lc"
    CONSECUTIVE_NUMBERS = "consecutive_numbers"
    SEQUENTIAL_ALPHA = "sequential_alpha"
    SEQUENTIAL_NUMBER = "sequential_number"
    SEQUENTIAL_SYMBOL = "sequential_symbol"
    BRUTE_FORCE_TIME = "brute_force_time"


class Check:
    """Validation check names."""

    COMMON_PASSWORD = "common_password"
    MINIMUM_LENGTH = "minimum_length"
    ALPHA_LC = "alpha_lc"
    ALPHA_UC = "alpha_uc"
    ALPHAS_ONLY = "alphas_only"
    NUMBERS_ONLY = "numbers_only"
    CONSECUTIVE_ALPHA_LC = "consecutive_alpha_lc"
    CONSECUTIVE_ALPHA_UC = "consecutive_alpha_uc"
    CONSECUTIVE_NUMBERS = "consecutive_numbers"
    MID_NUMBER_OR_SYMBOL = "mid_number_or_symbol"
    NUMBER = "number"
    SYMBOL = "symbol"
    REPEAT_CHARS = "repeat_chars"
    SEQUENTIAL_ALPHA = "sequential_alpha"
    SEQUENTIAL_NUMBER = "sequential_number"
    SEQUENTIAL_SYMBOL = "sequential_symbol"
    COMPLEXITY = "complexity"
    BRUTE_FORCE_TIME = "brute_force_time"
    MINIMUM_SCORE = "minimum_score"


# Evaluation order of the validation checks
VALIDATION_CHECKS = (
    Check.COMMON_PASSWORD,
    Check.MINIMUM_LENGTH,
    Check.ALPHA_LC,
    Check.ALPHA_UC,
    Check.ALPHAS_ONLY,
    Check.NUMBERS_ONLY,
    Check.CONSECUTIVE_ALPHA_LC,
    Check.CONSECUTIVE_ALPHA_UC,
    Check.CONSECUTIVE_NUMBERS,
    Check.MID_NUMBER_OR_SYMBOL,
    Check.NUMBER,
    Check.SYMBOL,
    Check.REPEAT_CHARS,
    Check.SEQUENTIAL_ALPHA,
    Check.SEQUENTIAL_NUMBER,
    Check.SEQUENTIAL_SYMBOL,
    Check.COMPLEXITY,
    Check.BRUTE_FORCE_TIME,
    Check.MINIMUM_SCORE,
)

CHECK_DESCRIPTIONS = {
    Check.COMMON_PASSWORD: "Password starts with a commonly used password",
    Check.MINIMUM_LENGTH: "Password is shorter than the minimum length",
    Check.ALPHA_LC: "Password must contain a lowercase letter",
    Check.ALPHA_UC: "Password must contain an uppercase letter",
    Check.ALPHAS_ONLY: "Password cannot consist of letters only",
    Check.NUMBERS_ONLY: "Password cannot consist of numbers only",
    Check.CONSECUTIVE_ALPHA_LC: "Password cannot contain consecutive lowercase letters",
    Check.CONSECUTIVE_ALPHA_UC: "Password cannot contain consecutive uppercase letters",
    Check.CONSECUTIVE_NUMBERS: "Password cannot contain consecutive numbers",
    Check.MID_NUMBER_OR_SYMBOL: "Password must contain a number or symbol in the middle",
    Check.NUMBER: "Password must contain a number",
    Check.SYMBOL: "Password must contain a symbol",
    Check.REPEAT_CHARS: "Password cannot repeat characters",
    Check.SEQUENTIAL_ALPHA: "Password cannot contain sequential letters",
    Check.SEQUENTIAL_NUMBER: "Password cannot contain sequential numbers",
    Check.SEQUENTIAL_SYMBOL: "Password cannot contain sequential symbols",
    Check.COMPLEXITY: "Password does not reach the minimum complexity",
    Check.BRUTE_FORCE_TIME: "Password can be brute-forced too quickly",
    Check.MINIMUM_SCORE: "Password does not reach the minimum score",
}
