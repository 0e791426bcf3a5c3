from __future__ import annotations
from typing import Dict, Iterable, List


def canonical_key(word: str) -> str:
    """
    Sort the characters of ``word`` by code point.
    Case is preserved: "Tea" -> "Tae", "eat" -> "aet".
    Two words are anagrams iff their keys are equal.
    """
    return "".join(sorted(word))


def group_words(words: Iterable[str]) -> Dict[str, List[str]]:
    """Single pass: key -> words sharing it, in first-seen order."""
    groups: Dict[str, List[str]] = {}
    for w in words:
        groups.setdefault(canonical_key(w), []).append(w)
    return groups
