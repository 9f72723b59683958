"""Lightweight HTTP client for an online English dictionary."""

from __future__ import annotations

import os
import re
from typing import Any, Optional

import requests

from ..core.exceptions import DictionaryApiError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_API_BASE = "https://api.dictionaryapi.dev/api/v2/entries/en"
API_BASE_ENV = "CROSSWORD_DICTIONARY_API_URL"
MAX_CLUE_LENGTH = 50


def simplify_clue(definition: str) -> str:
    """Shorten a dictionary definition into a crossword-style clue."""

    text = re.sub(r"^(a|an|the)\s+", "", definition, flags=re.IGNORECASE)
    text = re.sub(r"\s*\([^)]*\)", "", text)
    text = re.sub(r"\s*;.*$", "", text)
    text = re.sub(r"\s*,.*$", "", text)
    return text[:MAX_CLUE_LENGTH].strip()


class DictionaryApiClient:
    """Minimal client around a free dictionary REST API."""

    def __init__(
        self,
        api_base: Optional[str] = None,
        api_base_env: str = API_BASE_ENV,
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_base = (api_base or os.environ.get(api_base_env, DEFAULT_API_BASE)).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    def lookup_definition(self, word: str) -> Optional[str]:
        """Return the first definition for ``word`` or ``None`` when unknown."""

        url = f"{self.api_base}/{word.lower()}"
        try:
            response = self._session.get(url, timeout=self.timeout_seconds)
            if response.status_code == 404:
                LOGGER.debug("Dictionary has no entry for %s", word)
                return None
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise DictionaryApiError(f"Dictionary request failed for {word}: {exc}") from exc
        return self._extract_definition(data)

    def lookup_clue(self, word: str) -> Optional[str]:
        definition = self.lookup_definition(word)
        if not definition:
            return None
        return simplify_clue(definition) or None

    @staticmethod
    def _extract_definition(payload: Any) -> Optional[str]:
        """Extract the first definition text from the API payload."""
        if not isinstance(payload, list):
            return None
        for entry in payload:
            if not isinstance(entry, dict):
                continue
            meanings = entry.get("meanings")
            if not isinstance(meanings, list):
                continue
            for meaning in meanings:
                if not isinstance(meaning, dict):
                    continue
                definitions = meaning.get("definitions")
                if not isinstance(definitions, list):
                    continue
                for definition in definitions:
                    if not isinstance(definition, dict):
                        continue
                    text = definition.get("definition")
                    if isinstance(text, str) and text:
                        return text
        return None
