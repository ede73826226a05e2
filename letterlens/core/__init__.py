"""Core analysis engine for LetterLens."""

from .analysis import analyze_words
from .config import Config, load_config
from .geminates import detect_doubles, find_double_letters
from .models import (
    AnalysisResult,
    DoubleLetterStats,
    LetterCount,
    LetterStats,
    LetterTally,
    PatternStats,
    VowelCountStats,
)
from .normalization import normalize
from .patterns import classify_patterns, get_pattern
from .positions import count_positions, percent
from .ranking import assemble
from .types import OtherEntry, RawEntry, StringEntry, to_entry
from .vowels import get_unique_vowels, group_by_vowel_richness

__all__ = [
    "AnalysisResult",
    "Config",
    "DoubleLetterStats",
    "LetterCount",
    "LetterStats",
    "LetterTally",
    "OtherEntry",
    "PatternStats",
    "RawEntry",
    "StringEntry",
    "VowelCountStats",
    "analyze_words",
    "assemble",
    "classify_patterns",
    "count_positions",
    "detect_doubles",
    "find_double_letters",
    "get_pattern",
    "get_unique_vowels",
    "group_by_vowel_richness",
    "load_config",
    "normalize",
    "percent",
    "to_entry",
]
