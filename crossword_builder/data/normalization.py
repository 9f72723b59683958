"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

from ..core.exceptions import InvalidWordError

WORD_RE = re.compile(r"[^A-Za-z]")
SEPARATOR_RE = re.compile(r"[\s\-]+")


def _fold_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``.

    Accented letters are folded to their base letter; everything that is not
    a letter (spaces, hyphens, digits) is dropped.
    """

    if not text:
        return ""
    return WORD_RE.sub("", _fold_accents(text)).upper()


def normalize_entry(text: str) -> str:
    """Normalize a word typed by a user without changing its letters.

    Accents are folded and spaces or hyphens removed; any other character
    that is not an ASCII letter raises :class:`InvalidWordError`.
    """

    folded = SEPARATOR_RE.sub("", _fold_accents(text or ""))
    if WORD_RE.search(folded):
        raise InvalidWordError(f"{text!r} contains characters other than letters")
    return folded.upper()


def is_placeable(word: str) -> bool:
    """True when ``word`` is non-empty uppercase ASCII."""

    return bool(word) and word.isascii() and word.isalpha() and word.isupper()


__all__ = ["clean_word", "is_placeable", "normalize_entry"]
