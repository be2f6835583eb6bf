"""
Strength Domain Enumerations
"""

from enum import Enum

from pwpolicy.core.errors import ConfigurationError

from .constants import MAX_SCORE, MIN_SCORE


class ComplexityTier(Enum):
    """Qualitative strength label with a fixed rank."""

    VERY_WEAK = ("very weak", 0)
    WEAK = ("weak", 1)
    GOOD = ("good", 2)
    STRONG = ("strong", 3)
    VERY_STRONG = ("very strong", 4)

    def __init__(self, label: str, rank: int):
        self.label = label
        self.rank = rank

    def __str__(self) -> str:
        return self.label

    def __lt__(self, other: "ComplexityTier") -> bool:
        if not isinstance(other, ComplexityTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "ComplexityTier") -> bool:
        if not isinstance(other, ComplexityTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "ComplexityTier") -> bool:
        if not isinstance(other, ComplexityTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "ComplexityTier") -> bool:
        if not isinstance(other, ComplexityTier):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def from_score(cls, score: int) -> "ComplexityTier":
        """
        Map a score to its tier.

        The score is clamped to [0, 100] and split into five equal bands:
        rank = clamp(ceil((score + 1) / 20) - 1, 0, 4), which for integer
        scores reduces to score // 20 capped at 4.
        """
        tiers = list(cls)
        band = (MAX_SCORE - MIN_SCORE) // len(tiers)
        score = max(MIN_SCORE, min(int(score), MAX_SCORE))
        rank = -(-(score + 1) // band) - 1
        return tiers[max(0, min(rank, len(tiers) - 1))]

    @classmethod
    def from_rank(cls, rank: int) -> "ComplexityTier":
        for tier in cls:
            if tier.rank == rank:
                return tier
        raise ConfigurationError(f"Invalid complexity rank: {rank}", config_key="rank")

    @classmethod
    def from_label(cls, label: str) -> "ComplexityTier":
        """Resolve a tier from its label ("very weak") or name ("VERY_WEAK")."""
        normalized = str(label).strip().lower().replace("_", " ")
        for tier in cls:
            if tier.label == normalized:
                return tier
        raise ConfigurationError(
            "Complexity must be one of: very weak, weak, good, strong or very strong",
            config_key="minimum_complexity",
            details={"value": label},
        )

    @classmethod
    def labels(cls) -> list[str]:
        return [tier.label for tier in cls]
