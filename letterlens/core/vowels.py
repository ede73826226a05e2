"""Grouping of words by how many distinct vowels they use."""

from typing import Iterable

from letterlens.core.models import VowelCountStats
from letterlens.utils.constants import Constants


def get_unique_vowels(word: str) -> set[str]:
    """Distinct vowels present in a word."""
    return {char for char in word if char in Constants.VOWELS}


def summarize_vowel_group(words: list[str], count: int) -> VowelCountStats:
    """Build the stats for one bucket.

    ``longest`` and ``shortest`` are the first words of maximal and minimal
    length in list order, or empty strings for an empty bucket.
    """
    return VowelCountStats(
        count=count,
        words=tuple(words),
        longest=max(words, key=len, default=""),
        shortest=min(words, key=len, default=""),
    )


def group_by_vowel_richness(words: Iterable[str]) -> tuple[VowelCountStats, ...]:
    """Bucket words with exactly 3, 4 or 5 distinct vowels.

    Words with any other number of distinct vowels are left out. Buckets are
    returned in the fixed order 5, 4, 3 regardless of size.
    """
    buckets: dict[int, list[str]] = {size: [] for size in Constants.TRACKED_VOWEL_COUNTS}
    for word in words:
        size = len(get_unique_vowels(word))
        if size in buckets:
            buckets[size].append(word)
    return tuple(
        summarize_vowel_group(buckets[size], size) for size in Constants.TRACKED_VOWEL_COUNTS
    )
