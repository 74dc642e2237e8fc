# src/spellcheck/data/loader.py
"""
Word sources for the spell checker.

A repository returns the complete set of known words, lowercased. The
DictionaryCache wraps one repository and loads it at most once per process.
"""

import threading
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from ..logger import get_logger
from ..spelling.errors import DictionaryUnavailableError

logger = get_logger("data.loader")


class WordRepository:
    """Source of known-correct words. Other backends (db, service) subclass this."""

    def get_all_words(self) -> FrozenSet[str]:
        raise NotImplementedError


class FileWordRepository(WordRepository):
    def __init__(self, path):
        self.path = Path(path)

    def get_all_words(self) -> FrozenSet[str]:
        if not self.path.exists():
            logger.error(f"Dictionary not found at {self.path}")
            raise DictionaryUnavailableError(f"Dictionary not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read dictionary {self.path}: {e}")
            raise DictionaryUnavailableError(f"Failed to read dictionary {self.path}: {e}") from e

        words = set()
        for line in lines:
            w = line.strip()
            if w and not w.startswith("#"):
                words.add(w.lower())

        if not words:
            logger.warning(f"Dictionary at {self.path} is empty")
        logger.info(f"Loaded {len(words):,} words from {self.path}")
        return frozenset(words)


class InMemoryWordRepository(WordRepository):
    def __init__(self, words: Iterable[str]):
        self._words = frozenset(w.strip().lower() for w in words if w and w.strip())

    def get_all_words(self) -> FrozenSet[str]:
        return self._words


class DictionaryCache:
    """
    Init-once, read-many holder for the dictionary.

    The first get() loads from the repository under a lock; later calls return
    the same frozenset without locking. A failed load leaves the cache empty so
    the next call retries (and raises again if the source is still down).
    """

    def __init__(self, repository: WordRepository):
        self.repository = repository
        self._words: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._words is not None

    def get(self) -> FrozenSet[str]:
        words = self._words
        if words is not None:
            return words

        with self._lock:
            if self._words is None:
                self._words = frozenset(self.repository.get_all_words())
            return self._words
