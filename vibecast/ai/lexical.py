"""Lexical extraction: tokenization, word frequencies and keyword selection."""

import re
from collections import Counter
from typing import Dict, Iterable, List, Sequence

# Anything that is not a word character, whitespace, '#' or '@' becomes a space.
_NOISE_PATTERN = re.compile(r"[^\w\s#@]")

MIN_TOKEN_LENGTH = 3
MAX_KEYWORDS = 10
KEYWORD_CANDIDATES = 15

STOPWORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "day", "get", "has", "him", "his",
    "how", "man", "new", "now", "old", "see", "two", "way", "who", "boy",
    "did", "its", "let", "put", "say", "she", "too", "use",
})


def extract_words(raw_text: str) -> List[str]:
    """
    Split raw text into normalized tokens.

    Lowercases, replaces punctuation (except '#' and '@') with spaces,
    splits on whitespace and drops tokens shorter than three characters.
    """
    cleaned = _NOISE_PATTERN.sub(" ", raw_text.lower())
    return [word for word in cleaned.split() if len(word) >= MIN_TOKEN_LENGTH]


def word_frequency(tokens: Iterable[str]) -> Dict[str, int]:
    """Count occurrences of each token."""
    return dict(Counter(tokens))


def extract_keywords(freq: Dict[str, int], topics: Sequence[str]) -> List[str]:
    """
    Combine topics with the most frequent non-stopword tokens.

    Topics come first, followed by up to 15 top words (by descending
    count, ties alphabetical) minus stopwords. Duplicates are removed
    keeping the first occurrence, and the result is capped at 10.
    """
    top_words = [
        word for word, _ in sorted(freq.items(), key=lambda item: (-item[1], item[0]))[:KEYWORD_CANDIDATES]
    ]

    keywords: List[str] = []
    for word in list(topics) + [w for w in top_words if w not in STOPWORDS]:
        if word in STOPWORDS or word in keywords:
            continue
        keywords.append(word)
        if len(keywords) == MAX_KEYWORDS:
            break
    return keywords
