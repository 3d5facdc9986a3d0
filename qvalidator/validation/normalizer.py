"""
Question normalizer - canonical form used by every comparison layer.
Lowercases, strips punctuation, drops articles, auxiliaries and pronouns.
"""

import re

# articles, auxiliary verbs and pronouns that carry no property information
STOP_WORDS = frozenset({
    "is", "it", "a", "an", "the", "does", "do", "can", "will", "would",
    "they", "he", "she", "are", "were", "was", "did", "have", "has", "had",
})

# anything that is not a letter, digit or whitespace (underscore counts as punctuation)
_NON_WORD = re.compile(r"[^\w\s]|_")


def normalize(text: str) -> str:
    """Canonicalize a question. Never raises; empty input gives ""."""
    if not text:
        return ""

    stripped = _NON_WORD.sub("", str(text).lower())
    return " ".join(t for t in stripped.split() if t not in STOP_WORDS)


def tokens(text: str) -> list[str]:
    """Normalized tokens in question order."""
    return normalize(text).split()


def content_tokens(text: str) -> set[str]:
    """Normalized tokens longer than 2 characters."""
    return {t for t in tokens(text) if len(t) > 2}


__all__ = ["STOP_WORDS", "normalize", "tokens", "content_tokens"]
