"""JSON file store for the personal word bank.

The engine only works with the in-memory :class:`WordBank`; this store is
what the CLI uses to load it before an autofill pass and write the updated
usage statistics back afterwards.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..core.exceptions import WordBankError
from ..data.word_bank import WordBank
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class WordBankStore:
    """Load and save a :class:`WordBank` as a single JSON document."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> WordBank:
        if not self.path.exists():
            LOGGER.info("Word bank %s not found; starting empty", self.path)
            return WordBank()
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            raise WordBankError(f"Cannot read word bank {self.path}: {exc}") from exc
        bank = WordBank.from_jsonable(doc)
        LOGGER.info("Loaded %d word bank entries from %s", len(bank), self.path)
        return bank

    def save(self, bank: WordBank) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(bank.to_jsonable(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        LOGGER.info("Word bank saved: %s (%d entries)", self.path, len(bank))
