"""British to American spelling dictionary.

The dictionary ships as ``data/english.json`` next to this module. It is
read once per process and exposed as a read-only mapping, so normalizers
built in different threads or workers can share it freely.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from loguru import logger

DEFAULT_SPELLING_PATH = Path(__file__).parent / "data" / "english.json"


@dataclass(frozen=True)
class SpellingDictionary:
    """Immutable British -> American spelling map.

    Attributes:
        mapping: Read-only mapping of British spelling to American spelling
        source: File the mapping was loaded from, if any
    """
    mapping: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    source: Optional[Path] = None

    def __len__(self) -> int:
        return len(self.mapping)

    def __iter__(self) -> Iterator[str]:
        return iter(self.mapping)

    @property
    def is_empty(self) -> bool:
        return not self.mapping

    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        """Return the (british, american) pairs in file order."""
        return tuple(self.mapping.items())

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], source: Optional[Path] = None) -> "SpellingDictionary":
        cleaned = {
            str(british).lower(): str(american).lower()
            for british, american in mapping.items()
            if isinstance(british, str) and isinstance(american, str) and british.strip()
        }
        return cls(mapping=MappingProxyType(cleaned), source=source)

    @classmethod
    def from_file(cls, path: Path | str) -> "SpellingDictionary":
        """Load a dictionary from a JSON object file.

        A missing or malformed file yields an empty dictionary; the failure
        is logged and never raised.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load spelling dictionary {path}: {e}")
            return cls(source=path)

        if not isinstance(data, dict):
            logger.warning(f"Spelling dictionary {path} must be a JSON object, got {type(data).__name__}")
            return cls(source=path)

        return cls.from_mapping(data, source=path)

    @classmethod
    def default(cls) -> "SpellingDictionary":
        """Return the bundled dictionary, loading it on first use."""
        return _load_default()


@lru_cache(maxsize=1)
def _load_default() -> SpellingDictionary:
    dictionary = SpellingDictionary.from_file(DEFAULT_SPELLING_PATH)
    logger.debug(f"Loaded {len(dictionary)} spelling entries from {DEFAULT_SPELLING_PATH}")
    return dictionary
