# src/spellcheck/spelling/errors.py


class SpellCheckError(Exception):
    """Base class for spell check failures."""


class DictionaryUnavailableError(SpellCheckError):
    """The word source could not be read. Never treated as an empty dictionary."""


class SearchSpaceExceededError(SpellCheckError):
    def __init__(self, word: str, limit: int, size: int, reason: str = "candidates"):
        self.word = word
        self.limit = limit
        self.size = size
        self.reason = reason
        super().__init__(
            f"Search space exceeded for '{word}': {reason} {size:,} > limit {limit:,}"
        )
