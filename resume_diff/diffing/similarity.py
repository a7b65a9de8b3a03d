"""Word-set similarity and change significance."""

from __future__ import annotations

# A change keeping more than this share of vocabulary is cosmetic.
SIGNIFICANCE_THRESHOLD = 0.8


def word_set(text: str | None) -> set[str]:
    """Return the set of lowercase whitespace-delimited words in ``text``."""
    if not text:
        return set()
    return set(text.lower().split())


def string_similarity(a: str | None, b: str | None) -> float:
    """Jaccard index over the word sets of two strings.

    Emptiness is checked on the raw strings first: two empty strings are
    identical by convention (1.0) and a single empty side scores 0.0, even
    against whitespace. Strings that are whitespace-only after that check
    follow the same rule on their word sets. Duplicate words collapse and no
    stemming or accent folding is applied.
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    words_a = word_set(a)
    words_b = word_set(b)

    if not words_a and not words_b:
        return 1.0
    if not words_a or not words_b:
        return 0.0

    intersection = len(words_a & words_b)
    union = len(words_a | words_b)
    return intersection / union


def is_significant_change(
    original: str | None,
    tailored: str | None,
    threshold: float = SIGNIFICANCE_THRESHOLD,
) -> bool:
    """Return True when similarity is at or below ``threshold``."""
    return string_similarity(original, tailored) <= threshold
