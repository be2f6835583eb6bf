"""
Base Value Object

Provides common functionality for all value objects in the strength domain.
Concrete value objects are frozen dataclasses, which supply equality and
hashing; this base adds serialization.
"""

from abc import ABC
from enum import Enum
from typing import Any


class ValueObject(ABC):
    """Base class for all value objects."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            key: self._serialize_value(value)
            for key, value in self.__dict__.items()
            if not key.startswith("_")
        }

    def _serialize_value(self, value: Any) -> Any:
        """Serialize a single value for dictionary representation."""
        if hasattr(value, "to_dict"):
            return value.to_dict()
        if isinstance(value, Enum):
            return getattr(value, "label", value.value)
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self._serialize_value(item) for item in value]
        if isinstance(value, dict):
            return {k: self._serialize_value(v) for k, v in value.items()}
        return value
