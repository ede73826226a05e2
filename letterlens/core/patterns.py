"""Vowel/consonant shape patterns."""

from dataclasses import dataclass, field
from typing import Iterable

from letterlens.core.models import PatternStats
from letterlens.utils.constants import Constants


@dataclass
class PatternAggregate:
    """Running totals for one pattern signature."""

    count: int
    example: str
    words: list[str] = field(default_factory=list)


def get_pattern(word: str) -> str:
    """Map each letter to V (vowel) or C (anything else).

    e.g., 'tree' -> 'CCVV', 'a' -> 'V'
    """
    return "".join(
        Constants.VOWEL_SYMBOL if char in Constants.VOWELS else Constants.CONSONANT_SYMBOL
        for char in word
    )


def classify_patterns(words: Iterable[str]) -> dict[str, PatternAggregate]:
    """Aggregate words by pattern signature.

    The returned dict is ordered by first appearance of each signature. The
    first word seen with a signature becomes its example.
    """
    patterns: dict[str, PatternAggregate] = {}
    for word in words:
        signature = get_pattern(word)
        aggregate = patterns.get(signature)
        if aggregate is None:
            aggregate = PatternAggregate(count=0, example=word)
            patterns[signature] = aggregate
        aggregate.count += 1
        aggregate.words.append(word)
    return patterns


def rank_patterns(
    patterns: dict[str, PatternAggregate], limit: int = Constants.PATTERN_LIMIT
) -> tuple[PatternStats, ...]:
    """Top ``limit`` patterns by count, ties kept in discovery order."""
    ranked = sorted(patterns.items(), key=lambda item: item[1].count, reverse=True)
    return tuple(
        PatternStats(
            pattern=signature,
            count=aggregate.count,
            example=aggregate.example,
            words=tuple(aggregate.words),
        )
        for signature, aggregate in ranked[:limit]
    )
