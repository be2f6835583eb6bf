"""
Score Breakdown Value Object

Itemized signed contributions that add up to a password's raw score.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from ..constants import MAX_SCORE, MIN_SCORE


class ScoreBreakdown(Mapping):
    """
    Read-only, insertion-ordered mapping of contribution name to points.

    Entries appear only when their condition holds, except the always-present
    ``common_password``, ``minimum_length`` and ``length_bonus`` entries.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, int] | None = None) -> None:
        object.__setattr__(self, "_entries", MappingProxyType(dict(entries or {})))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Cannot modify immutable ScoreBreakdown")

    def __getitem__(self, key: str) -> int:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ScoreBreakdown):
            return list(self.items()) == list(other.items())
        if isinstance(other, Mapping):
            return dict(self._entries) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._entries.items()))

    def __repr__(self) -> str:
        return f"ScoreBreakdown({dict(self._entries)!r})"

    @property
    def total(self) -> int:
        """Unclamped sum of all contributions."""
        return sum(self._entries.values())

    @property
    def score(self) -> int:
        """Sum of all contributions clamped to [0, 100]."""
        return max(MIN_SCORE, min(self.total, MAX_SCORE))

    @property
    def bonuses(self) -> dict[str, int]:
        return {name: points for name, points in self._entries.items() if points > 0}

    @property
    def penalties(self) -> dict[str, int]:
        return {name: points for name, points in self._entries.items() if points < 0}

    def to_dict(self) -> dict[str, int]:
        return dict(self._entries)
