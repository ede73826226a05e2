"""Ranking of aggregates and assembly of the final result."""

from letterlens.core.geminates import DoubleAggregate, rank_doubles
from letterlens.core.models import (
    AnalysisResult,
    LetterCount,
    LetterStats,
    LetterTally,
    VowelCountStats,
)
from letterlens.core.patterns import PatternAggregate, rank_patterns
from letterlens.core.positions import percent
from letterlens.utils.constants import Constants


def rank_letters(counts: dict[str, int]) -> tuple[LetterCount, ...]:
    """Letters by count descending. Ties stay in alphabetical order."""
    ordered = sorted(
        ((letter, counts[letter]) for letter in Constants.ALPHABET),
        key=lambda item: item[1],
        reverse=True,
    )
    return tuple(LetterCount(letter=letter.upper(), count=count) for letter, count in ordered)


def build_breakdown(tally: LetterTally) -> tuple[LetterStats, ...]:
    """Full per-letter table with position percentages, sorted by total."""
    rows = []
    for letter in Constants.ALPHABET:
        total = tally.total[letter]
        begin = tally.begin[letter]
        middle = tally.middle[letter]
        end = tally.end[letter]
        rows.append(
            LetterStats(
                letter=letter.upper(),
                total=total,
                begin=begin,
                begin_pct=percent(begin, total),
                middle=middle,
                middle_pct=percent(middle, total),
                end=end,
                end_pct=percent(end, total),
            )
        )
    rows.sort(key=lambda row: row.total, reverse=True)
    return tuple(rows)


def assemble(
    tally: LetterTally,
    patterns: dict[str, PatternAggregate],
    doubles: dict[str, DoubleAggregate],
    vowel_groups: tuple[VowelCountStats, ...],
    total_words: int,
    pattern_limit: int = Constants.PATTERN_LIMIT,
) -> AnalysisResult:
    """Combine stage outputs into an AnalysisResult."""
    return AnalysisResult(
        total_words=total_words,
        overall=rank_letters(tally.total),
        starts_with=rank_letters(tally.begin),
        ends_with=rank_letters(tally.end),
        in_middle=rank_letters(tally.middle),
        breakdown=build_breakdown(tally),
        patterns=rank_patterns(patterns, pattern_limit),
        double_letters=rank_doubles(doubles),
        vowel_counts=tuple(vowel_groups),
    )
