"""Detection of doubled consonants."""

from dataclasses import dataclass, field
from typing import Iterable

from letterlens.core.models import DoubleLetterStats
from letterlens.utils.constants import Constants


@dataclass
class DoubleAggregate:
    """Running totals for one geminate pair."""

    count: int = 0
    examples: list[str] = field(default_factory=list)


def find_double_letters(word: str) -> list[str]:
    """Return every adjacent pair of identical non-vowel letters.

    Overlapping pairs are all reported: 'ttt' -> ['tt', 'tt'].
    """
    doubles = []
    for i in range(len(word) - 1):
        if word[i] == word[i + 1] and word[i] not in Constants.VOWELS:
            doubles.append(word[i : i + 2])
    return doubles


def detect_doubles(
    words: Iterable[str], example_limit: int = Constants.EXAMPLE_LIMIT
) -> dict[str, DoubleAggregate]:
    """Aggregate geminate pairs over all words, in order of first appearance.

    Every occurrence increments the pair's count. Examples hold the first
    ``example_limit`` distinct words that contain the pair.
    """
    doubles: dict[str, DoubleAggregate] = {}
    for word in words:
        for pair in find_double_letters(word):
            aggregate = doubles.setdefault(pair, DoubleAggregate())
            aggregate.count += 1
            if len(aggregate.examples) < example_limit and word not in aggregate.examples:
                aggregate.examples.append(word)
    return doubles


def rank_doubles(doubles: dict[str, DoubleAggregate]) -> tuple[DoubleLetterStats, ...]:
    """All pairs by count, ties kept in discovery order."""
    ranked = sorted(doubles.items(), key=lambda item: item[1].count, reverse=True)
    return tuple(
        DoubleLetterStats(pair=pair, count=aggregate.count, examples=tuple(aggregate.examples))
        for pair, aggregate in ranked
    )
