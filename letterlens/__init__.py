"""LetterLens - Letter usage profiler for English word lists.

Profile how letters are used across a word list: positional frequency,
vowel/consonant shapes, doubled consonants and vowel richness.
"""

from letterlens.core import AnalysisResult, Config, analyze_words, load_config
from letterlens.processing import run_pipeline
from letterlens.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "AnalysisResult",
    "Config",
    "analyze_words",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
