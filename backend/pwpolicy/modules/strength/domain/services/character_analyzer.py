"""
Character Class Analyzer

Stateless detectors over a password string. Every function is defined for
every string, including the empty one, and works on Unicode code points:
lengths, class membership and runs all count code points.

Two notions of "symbol" coexist and are kept apart on purpose:

- ``is_symbol_by_exclusion``: anything that is not an ASCII letter or digit
  (a space, an emoji and "!" all qualify). Used by ``has_symbol`` and the
  ``symbol`` validation check.
- ``is_in_symbol_alphabet``: literal membership in ``SYMBOL_SET``. Used for
  symbol counts in the score, the mid-string test, sequential symbol runs
  and the brute-force key space.
"""

import re
from collections.abc import Iterable
from itertools import groupby

from ..constants import (
    ALPHA_SEQUENCE,
    ALPHAS_LC,
    ALPHAS_UC,
    NUMBER_SEQUENCE,
    NUMBERS,
    SEQUENCE_WINDOW,
    SYMBOL_SEQUENCE,
    SYMBOL_SET,
)

_ALPHAS = frozenset(ALPHAS_LC + ALPHAS_UC)
_ALPHANUMERICS = frozenset(ALPHAS_LC + ALPHAS_UC + NUMBERS)
_NUMBERS_AND_SYMBOLS = frozenset(NUMBERS) | SYMBOL_SET

_WORD_AND_NUMBER = re.compile(r"[a-z]+[0-9]+|[0-9]+[a-z]+", re.IGNORECASE | re.ASCII)


# =============================================================================
# Single characters
# =============================================================================


def is_symbol_by_exclusion(char: str) -> bool:
    """True if the character is neither an ASCII letter nor a digit."""
    return char not in _ALPHANUMERICS


def is_in_symbol_alphabet(char: str) -> bool:
    """True if the character belongs to the fixed symbol alphabet."""
    return char in SYMBOL_SET


# =============================================================================
# Presence
# =============================================================================


def contains_any(value: str, alphabet: Iterable[str]) -> bool:
    members = frozenset(alphabet)
    return any(char in members for char in value)


def has_alpha_uppercase(value: str) -> bool:
    return contains_any(value, ALPHAS_UC)


def has_alpha_lowercase(value: str) -> bool:
    return contains_any(value, ALPHAS_LC)


def has_number(value: str) -> bool:
    return contains_any(value, NUMBERS)


def has_symbol(value: str) -> bool:
    """True if any character is a symbol by exclusion (see module docstring)."""
    return any(is_symbol_by_exclusion(char) for char in value)


def has_symbol_in_alphabet(value: str) -> bool:
    """True if any character belongs to the symbol alphabet."""
    return any(is_in_symbol_alphabet(char) for char in value)


def has_mid_number_or_symbol(value: str) -> bool:
    """
    True if a digit or symbol-alphabet character occurs strictly between the
    first and last character. Strings shorter than 3 have no middle.
    """
    return count_mid_numbers_or_symbols(value) > 0


def count_mid_numbers_or_symbols(value: str) -> int:
    return sum(1 for char in value[1:-1] if char in _NUMBERS_AND_SYMBOLS)


# =============================================================================
# Whole-string shape
# =============================================================================


def has_alphas_only(value: str) -> bool:
    """True if every character is a letter; vacuously true for ""."""
    return all(char in _ALPHAS for char in value)


def has_numbers_only(value: str) -> bool:
    """True if every character is a digit; vacuously true for ""."""
    return all(char in NUMBERS for char in value)


def has_possible_word_and_number(value: str) -> bool:
    """True if the whole string is letters then digits, or digits then letters."""
    return _WORD_AND_NUMBER.fullmatch(value) is not None


# =============================================================================
# Counting
# =============================================================================


def count_in_alphabet(value: str, alphabet: Iterable[str]) -> int:
    """Number of characters of ``value`` that belong to ``alphabet``."""
    members = frozenset(alphabet)
    return sum(1 for char in value if char in members)


def count_repeated_chars(value: str) -> int:
    """Total characters minus distinct characters."""
    return len(value) - len(set(value))


def has_repeated_chars(value: str) -> bool:
    return count_repeated_chars(value) > 0


# =============================================================================
# Consecutive runs
# =============================================================================


def has_consecutive_run(value: str, alphabet: Iterable[str]) -> bool:
    """True if two adjacent characters both belong to ``alphabet``."""
    members = frozenset(alphabet)
    return any(
        left in members and right in members for left, right in zip(value, value[1:])
    )


def count_consecutive_chars(value: str, alphabet: Iterable[str]) -> int:
    """
    Sum of (run length - 1) over the maximal runs of ``alphabet`` characters.

    Isolated characters contribute nothing; "ABcDEF" has runs "AB" and "DEF"
    for the uppercase alphabet and yields 1 + 2 = 3.
    """
    members = frozenset(alphabet)
    return sum(
        sum(1 for _ in run) - 1
        for in_alphabet, run in groupby(value, key=lambda char: char in members)
        if in_alphabet
    )


def has_consecutive_alpha_uc(value: str) -> bool:
    return has_consecutive_run(value, ALPHAS_UC)


def has_consecutive_alpha_lc(value: str) -> bool:
    return has_consecutive_run(value, ALPHAS_LC)


def has_consecutive_numbers(value: str) -> bool:
    return has_consecutive_run(value, NUMBERS)


# =============================================================================
# Sequential runs
# =============================================================================


def count_sequential_chars(value: str, stack: str) -> int:
    """
    Count the 3-character windows of ``stack`` found in ``value``.

    The window slides one position at a time over the ordered stack; each
    window counts once if it, or its reverse, occurs anywhere in ``value``.
    Overlapping windows count independently, so "abcde" against the alphabet
    yields 3 (abc, bcd, cde).
    """
    count = 0
    for start in range(len(stack) - SEQUENCE_WINDOW + 1):
        forward = stack[start:start + SEQUENCE_WINDOW]
        if forward in value or forward[::-1] in value:
            count += 1
    return count


def count_sequential_alphas(value: str) -> int:
    return count_sequential_chars(value.lower(), ALPHA_SEQUENCE)


def count_sequential_numbers(value: str) -> int:
    return count_sequential_chars(value, NUMBER_SEQUENCE)


def count_sequential_symbols(value: str) -> int:
    return count_sequential_chars(value, SYMBOL_SEQUENCE)


def has_sequential_alphas(value: str) -> bool:
    return count_sequential_alphas(value) > 0


def has_sequential_numbers(value: str) -> bool:
    return count_sequential_numbers(value) > 0


def has_sequential_symbols(value: str) -> bool:
    return count_sequential_symbols(value) > 0
