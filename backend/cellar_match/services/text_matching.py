"""
Text normalization and edit-distance similarity.

Shared by catalog resolution (name/producer comparison). Uses rapidfuzz's
Levenshtein implementation for the distance itself.
"""

import re
import unicodedata
from typing import Optional

from rapidfuzz.distance import Levenshtein

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """
    Canonicalize free text for comparison.

    Lowercases, strips diacritics ("Château" -> "chateau"), drops anything
    that is not a letter, digit or whitespace, and collapses whitespace.
    Idempotent: normalize(normalize(x)) == normalize(x).
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    cleaned = _NON_ALNUM.sub("", stripped)
    return _WHITESPACE.sub(" ", cleaned).strip()


def levenshtein_distance(s1: str, s2: str) -> int:
    """Minimum number of single-character inserts, deletes and substitutions."""
    return Levenshtein.distance(s1, s2)


def similarity(s1: Optional[str], s2: Optional[str]) -> float:
    """
    Edit-distance similarity between two strings (0-1).

    Both inputs are normalized first. Two empty strings are identical (1.0).
    Score is (longer_len - distance) / longer_len, symmetric in its arguments.
    """
    a = normalize(s1)
    b = normalize(s2)

    longer_len = max(len(a), len(b))
    if longer_len == 0:
        return 1.0

    distance = levenshtein_distance(a, b)
    return (longer_len - distance) / longer_len
