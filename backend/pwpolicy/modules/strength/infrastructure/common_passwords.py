"""
Common Password Catalogue

In-memory index over a list of frequently used passwords. The list is read
once; afterwards the catalogue is read-only and can back any number of
evaluators.

Matching is prefix-based: a candidate is common when some catalogued entry,
compared case-insensitively, is a prefix of it. "Password!2024" is therefore
common because it starts with "password".
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from functools import lru_cache
from importlib import resources
from pathlib import Path

from pwpolicy.core.errors import ConfigurationError
from pwpolicy.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOGUE_PACKAGE = "pwpolicy.modules.strength.infrastructure"
DEFAULT_CATALOGUE_FILE = "data/common_passwords.txt"
# Bundled entries are at least this long. Under prefix matching a short entry
# such as "test" or "john" would flag ordinary passphrases starting with it.
MIN_BUNDLED_ENTRY_LENGTH = 6


class CommonPasswordCatalogue:
    """Case-insensitive prefix index of common passwords."""

    def __init__(self, entries: Iterable[str], source: str | None = None) -> None:
        normalized = {self._normalize(entry) for entry in entries}
        normalized.discard("")

        self._entries = frozenset(normalized)
        self._lengths = tuple(sorted({len(entry) for entry in self._entries}))
        self.source = source

    @staticmethod
    def _normalize(value: str) -> str:
        return value.strip().lower()

    def __call__(self, candidate: str) -> bool:
        return self.contains(candidate)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CommonPasswordCatalogue(entries={len(self)}, source={self.source!r})"

    def contains(self, candidate: str) -> bool:
        """
        True if some entry is a case-insensitive prefix of ``candidate``.

        Only the prefixes whose length matches a catalogued entry are checked,
        so the cost depends on the number of distinct entry lengths, not on
        the size of the catalogue.
        """
        lowered = candidate.lower()
        for length in self._lengths:
            if length > len(lowered):
                break
            if lowered[:length] in self._entries:
                return True
        return False

    def matching_entry(self, candidate: str) -> str | None:
        """The shortest catalogued entry that prefixes ``candidate``, if any."""
        lowered = candidate.lower()
        for length in self._lengths:
            if length > len(lowered):
                break
            if lowered[:length] in self._entries:
                return lowered[:length]
        return None

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> CommonPasswordCatalogue:
        """
        Load a newline-delimited UTF-8 word list.

        Raises:
            ConfigurationError: If the path is missing, not a file or unreadable
        """
        file_path = Path(path)
        if not file_path.is_file() or not os.access(file_path, os.R_OK):
            raise ConfigurationError(
                "The given location of the common password file does not exist "
                "or is not readable",
                config_key="common_passwords_file",
                details={"path": str(file_path)},
            )

        try:
            with file_path.open(encoding="utf-8", errors="replace") as f:
                catalogue = cls(f, source=str(file_path))
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read common password file {file_path}: {e}",
                config_key="common_passwords_file",
                cause=e,
            ) from e

        logger.info(
            "Common password catalogue loaded",
            source=catalogue.source,
            entries=len(catalogue),
        )
        return catalogue

    @classmethod
    def default(cls) -> CommonPasswordCatalogue:
        """The bundled catalogue, loaded once per process."""
        return _load_default_catalogue()


@lru_cache(maxsize=1)
def _load_default_catalogue() -> CommonPasswordCatalogue:
    bundled = resources.files(DEFAULT_CATALOGUE_PACKAGE).joinpath(
        DEFAULT_CATALOGUE_FILE
    )
    with resources.as_file(bundled) as path:
        return CommonPasswordCatalogue.from_file(path)
