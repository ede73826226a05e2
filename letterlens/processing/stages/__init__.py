"""Pipeline stages for analyzing a word list."""

from .analysis import run_analysis
from .data_models import AnalysisData, WordListData
from .output import write_output, write_result_to_stream
from .word_loading import load_words

__all__ = [
    # Data models
    "AnalysisData",
    "WordListData",
    # Stage functions
    "load_words",
    "run_analysis",
    "write_output",
    "write_result_to_stream",
]
