"""Word and clue providers consumed by the autofill engine."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Protocol

from ..core.exceptions import DictionaryApiError
from ..utils.logger import get_logger
from .fallback_words import FALLBACK_CLUES
from .normalization import clean_word

LOGGER = get_logger(__name__)


class WordSource(Protocol):
    """Protocol implemented by all word/clue providers."""

    def get_words(self, length: Optional[int] = None) -> List[str]:
        """Return uppercase candidate words, optionally of one length."""

    def get_clue(self, word: str) -> str:
        """Return a short clue; never raises for an unknown word."""


class ClueLookup(Protocol):
    def lookup_clue(self, word: str) -> Optional[str]:
        ...


def placeholder_clue(word: str) -> str:
    return f"Clue for {word}"


class BuiltinWordSource:
    """Word source backed by an in-memory word-to-clue table.

    Clues resolve from a local cache, then the table, then the optional
    ``clue_client`` (for words outside the table), and finally a placeholder.
    """

    def __init__(
        self,
        clues: Optional[Mapping[str, str]] = None,
        clue_client: Optional[ClueLookup] = None,
    ) -> None:
        table = FALLBACK_CLUES if clues is None else clues
        self._clues: Dict[str, str] = {clean_word(word): clue for word, clue in table.items()}
        self._clue_client = clue_client
        self._cache: Dict[str, str] = {}

    def get_words(self, length: Optional[int] = None) -> List[str]:
        words = list(self._clues)
        if length:
            return [word for word in words if len(word) == length]
        return words

    def get_clue(self, word: str) -> str:
        key = clean_word(word)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        clue = self._clues.get(key)
        if clue is None and self._clue_client is not None:
            try:
                clue = self._clue_client.lookup_clue(key)
            except DictionaryApiError as exc:
                LOGGER.warning("Dictionary unavailable for %s: %s", key, exc)
        if not clue:
            clue = placeholder_clue(key)
        self._cache[key] = clue
        return clue
