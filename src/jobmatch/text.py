"""Text normalisation, tokenisation and term counting."""
from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, List, Optional

# Common English words ignored when matching.
STOP_WORDS = frozenset(
    {
        "the", "and", "that", "have", "for", "not", "with", "you", "this", "but",
        "his", "from", "they", "will", "more", "what", "when", "who", "make",
        "like", "time", "just", "know", "take", "into", "year", "your", "good",
        "some", "could", "them", "than", "then", "look", "only", "come", "over",
        "think", "also", "back", "after", "work", "first", "well", "even", "want",
        "because", "these", "give", "most", "very",
    }
)

MIN_TERM_LENGTH = 4

_NON_WORD = re.compile(r"[^\w\s]")


def normalize(text: Optional[str]) -> str:
    """Lowercase ``text``; ``None`` becomes an empty string."""
    if not text:
        return ""
    return text.lower()


def is_significant(word: str, stop_words: frozenset = STOP_WORDS) -> bool:
    return len(word) >= MIN_TERM_LENGTH and word not in stop_words


def tokenize(text: Optional[str], stop_words: frozenset = STOP_WORDS) -> List[str]:
    """Split normalised text into significant terms, keeping order and duplicates."""
    if not text:
        return []
    words = _NON_WORD.sub(" ", text).split()
    return [word for word in words if is_significant(word, stop_words)]


def count_terms(terms: Iterable[str]) -> Counter:
    """Return a term -> occurrence count mapping."""
    return Counter(terms)


def term_frequencies(text: Optional[str]) -> Counter:
    return count_terms(tokenize(normalize(text)))
