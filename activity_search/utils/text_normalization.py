"""
Text normalization for locale-insensitive comparison.
Case-folds and strips diacritics so that "ÉCOLE", "école" and "ecole" compare equal.
"""

import unicodedata
from typing import Optional

from ..config import WILDCARD_TOKEN


def normalize(text: Optional[str]) -> str:
    """Case-fold text and remove combining marks.

    NFD decomposition exposes accents as combining marks, which are dropped;
    the rest is recomposed to NFC so scripts like Hangul keep their syllables.

    Examples:
        normalize('ÉCOLE') -> 'ecole'
        normalize('Randonnée') -> 'randonnee'
        normalize(None) -> ''
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.casefold())
    stripped = "".join(c for c in decomposed if not unicodedata.category(c).startswith("M"))
    return unicodedata.normalize("NFC", stripped)


def normalize_filter(text: Optional[str]) -> str:
    """Normalize a user-typed filter.

    Blank input and the wildcard token both mean "no filter" and yield ''.
    """
    if text is None:
        return ""
    trimmed = text.strip()
    if not trimmed or trimmed == WILDCARD_TOKEN:
        return ""
    return normalize(trimmed)
