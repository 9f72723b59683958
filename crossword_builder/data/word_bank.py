"""Personal weighted word bank used to prioritize autofill."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..core.exceptions import WordBankError
from .normalization import clean_word

MIN_WEIGHT = 1
MAX_WEIGHT = 10
DEFAULT_WEIGHT = 5


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise WordBankError(f"Invalid timestamp in word bank: {value!r}") from exc


@dataclass
class WordBankEntry:
    """A user-curated word with its clue and usage statistics."""

    word: str
    clue: str
    weight: int = DEFAULT_WEIGHT
    category: Optional[str] = None
    times_used: int = 0
    date_added: datetime = field(default_factory=_now)
    last_used: Optional[datetime] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def priority_key(self):
        """Sort key: heavier first, then most used, then alphabetical."""
        return (-self.weight, -self.times_used, self.word)

    def to_jsonable(self) -> dict:
        return {
            "id": self.id,
            "word": self.word,
            "clue": self.clue,
            "weight": self.weight,
            "category": self.category,
            "times_used": self.times_used,
            "date_added": self.date_added.isoformat(),
            "last_used": self.last_used.isoformat() if self.last_used else None,
        }

    @classmethod
    def from_jsonable(cls, data: dict) -> "WordBankEntry":
        try:
            word = clean_word(data["word"])
            clue = str(data.get("clue", ""))
        except (KeyError, TypeError) as exc:
            raise WordBankError(f"Malformed word bank entry: {data!r}") from exc
        entry = cls(
            word=word,
            clue=clue,
            weight=_validate_weight(data.get("weight", DEFAULT_WEIGHT)),
            category=data.get("category"),
            times_used=int(data.get("times_used", 0)),
            last_used=_parse_timestamp(data.get("last_used")),
        )
        added = _parse_timestamp(data.get("date_added"))
        if added is not None:
            entry.date_added = added
        if data.get("id"):
            entry.id = str(data["id"])
        return entry


def _validate_weight(weight) -> int:
    try:
        value = int(weight)
    except (TypeError, ValueError) as exc:
        raise WordBankError(f"Weight must be an integer, got {weight!r}") from exc
    if not MIN_WEIGHT <= value <= MAX_WEIGHT:
        raise WordBankError(f"Weight must be between {MIN_WEIGHT} and {MAX_WEIGHT}, got {value}")
    return value


class WordBank:
    """In-memory collection of :class:`WordBankEntry` keyed by word."""

    def __init__(self, entries: Optional[List[WordBankEntry]] = None, categories: Optional[List[str]] = None) -> None:
        self._entries: Dict[str, WordBankEntry] = {}
        self.categories: List[str] = list(categories or [])
        for entry in entries or []:
            self._entries[entry.word] = entry
            self._remember_category(entry.category)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: str) -> bool:
        return clean_word(word) in self._entries

    @property
    def entries(self) -> List[WordBankEntry]:
        return list(self._entries.values())

    def add_entry(
        self,
        word: str,
        clue: str,
        weight: int = DEFAULT_WEIGHT,
        category: Optional[str] = None,
    ) -> WordBankEntry:
        """Add ``word`` or update the clue, weight and category of an existing entry."""

        cleaned = clean_word(word)
        if not cleaned:
            raise WordBankError(f"Word bank entries need at least one letter: {word!r}")
        weight = _validate_weight(weight)
        existing = self._entries.get(cleaned)
        if existing is not None:
            existing.clue = clue
            existing.weight = weight
            existing.category = category
            entry = existing
        else:
            entry = WordBankEntry(word=cleaned, clue=clue, weight=weight, category=category)
            self._entries[cleaned] = entry
        self._remember_category(category)
        return entry

    def remove_entry(self, word: str) -> bool:
        return self._entries.pop(clean_word(word), None) is not None

    def find(self, word: str) -> Optional[WordBankEntry]:
        return self._entries.get(clean_word(word))

    def entries_for_length(self, length: int) -> List[WordBankEntry]:
        matching = [entry for entry in self._entries.values() if len(entry.word) == length]
        matching.sort(key=WordBankEntry.priority_key)
        return matching

    def mark_used(self, word: str, when: Optional[datetime] = None) -> Optional[WordBankEntry]:
        entry = self.find(word)
        if entry is None:
            return None
        entry.times_used += 1
        entry.last_used = when or _now()
        return entry

    def _remember_category(self, category: Optional[str]) -> None:
        if category and category not in self.categories:
            self.categories.append(category)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> dict:
        return {
            "entries": [entry.to_jsonable() for entry in self._entries.values()],
            "categories": list(self.categories),
        }

    @classmethod
    def from_jsonable(cls, data: dict) -> "WordBank":
        if not isinstance(data, dict):
            raise WordBankError("Word bank document must be a JSON object")
        entries = [WordBankEntry.from_jsonable(item) for item in data.get("entries", [])]
        return cls(entries=entries, categories=data.get("categories", []))
