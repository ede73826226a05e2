"""Analysis entry point."""

from typing import Any, Iterable

from loguru import logger

from letterlens.core.geminates import detect_doubles
from letterlens.core.models import AnalysisResult
from letterlens.core.normalization import normalize
from letterlens.core.patterns import classify_patterns
from letterlens.core.positions import count_positions
from letterlens.core.ranking import assemble
from letterlens.core.vowels import group_by_vowel_richness
from letterlens.utils.constants import Constants


def analyze_words(
    raw_list: Iterable[Any],
    pattern_limit: int = Constants.PATTERN_LIMIT,
    example_limit: int = Constants.EXAMPLE_LIMIT,
) -> AnalysisResult:
    """Build the letter usage profile of a word list.

    Never raises for a sequence of strings and non-strings. Empty input, or
    input with no letters at all, gives the all-zero result.

    Args:
        raw_list: Ordered raw entries; non-strings are ignored
        pattern_limit: Number of ranked patterns to keep
        example_limit: Maximum example words per doubled consonant

    Returns:
        AnalysisResult for the normalized words
    """
    words = normalize(raw_list)
    logger.debug(f"Normalized {len(words)} words")

    return assemble(
        count_positions(words),
        classify_patterns(words),
        detect_doubles(words, example_limit),
        group_by_vowel_richness(words),
        total_words=len(words),
        pattern_limit=pattern_limit,
    )
