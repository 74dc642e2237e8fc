# src/spellcheck/spelling/service.py
"""
Spell check strategies.

- ContainmentSpellCheckService: one dictionary lookup, never suggests
- PermutationSpellCheckService: lookup, then repeat/vowel candidate generation
  filtered against the dictionary

Both take a DictionaryCache handle, so the dictionary is loaded once and shared
read-only between concurrent calls. Everything else is per call.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .. import config
from ..data.loader import DictionaryCache, FileWordRepository
from ..logger import get_logger
from .casing import is_mixed_case
from .collapse import collapse
from .errors import SearchSpaceExceededError
from .permutations import generate

logger = get_logger("spelling.service")


@dataclass(frozen=True)
class SpellCheckResult:
    correct: bool
    suggestions: FrozenSet[str] = field(default_factory=frozenset)


class SpellCheckService:
    def check_spelling(self, word: str) -> SpellCheckResult:
        """
        Correct words give (True, {}). Otherwise (False, suggestions), where
        suggestions may be empty.
        """
        raise NotImplementedError


class ContainmentSpellCheckService(SpellCheckService):
    def __init__(self, dictionary: DictionaryCache):
        self.dictionary = dictionary

    def check_spelling(self, word: str) -> SpellCheckResult:
        return SpellCheckResult(word.lower() in self.dictionary.get())


class PermutationSpellCheckService(SpellCheckService):
    def __init__(
        self,
        dictionary: DictionaryCache,
        max_candidates: Optional[int] = None,
        max_word_length: Optional[int] = None,
    ):
        """
        Args:
            dictionary: shared dictionary handle
            max_candidates: ceiling on distinct generated candidates (None/0 = off)
            max_word_length: longest word sent to the generator (None/0 = off)
        """
        self.dictionary = dictionary
        self.max_candidates = max_candidates
        self.max_word_length = max_word_length

    def check_spelling(self, word: str) -> SpellCheckResult:
        words = self.dictionary.get()
        lowered = word.lower()

        # Mixed casing is a misspelling in itself, even if the letters are right
        if is_mixed_case(word):
            return SpellCheckResult(False, self.suggest(lowered))

        # "Hello" and "HELLO" are fine once lowercased
        if lowered in words:
            return SpellCheckResult(True)

        return SpellCheckResult(False, self.suggest(lowered))

    def suggest(self, word: str) -> FrozenSet[str]:
        """Dictionary words reachable from an already lowercased word."""
        if self.max_word_length and len(word) > self.max_word_length:
            raise SearchSpaceExceededError(word, self.max_word_length, len(word), reason="length")

        words = self.dictionary.get()
        candidates = generate(collapse(word), max_candidates=self.max_candidates)

        suggestions = frozenset(c for c in candidates if c in words)
        logger.debug(f"'{word}': {len(candidates):,} candidates, {len(suggestions)} suggestions")
        return suggestions


def build_service(
    strategy: Optional[str] = None,
    dictionary_path: Optional[str] = None,
    max_candidates: Optional[int] = None,
    max_word_length: Optional[int] = None,
) -> SpellCheckService:
    """Wire a file-backed dictionary into the configured strategy."""
    strategy = strategy or config.STRATEGY
    cache = DictionaryCache(FileWordRepository(dictionary_path or config.DICTIONARY_PATH))

    if strategy == "containment":
        return ContainmentSpellCheckService(cache)
    if strategy == "permutation":
        return PermutationSpellCheckService(
            cache,
            max_candidates=config.MAX_CANDIDATES if max_candidates is None else max_candidates,
            max_word_length=config.MAX_WORD_LENGTH if max_word_length is None else max_word_length,
        )
    raise ValueError(f"Unknown spell check strategy: {strategy!r} (expected 'permutation' or 'containment')")
