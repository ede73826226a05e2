"""Pattern, doubled consonant and vowel group reports."""

from pathlib import Path

from letterlens.core import AnalysisResult
from letterlens.reports.helpers import (
    format_word_list,
    write_report_header,
    write_subsection_header,
)
from letterlens.utils import write_file_safely

PREVIEW_WORDS = 30


def generate_patterns_report(result: AnalysisResult, report_dir: Path) -> None:
    """List ranked vowel/consonant patterns with their words."""
    filepath = report_dir / "patterns.txt"

    def write_patterns(f):
        write_report_header(f, "VOWEL/CONSONANT PATTERNS")
        if not result.patterns:
            f.write("No patterns found.\n")
            return

        for rank, stats in enumerate(result.patterns, 1):
            f.write(f"{rank:>3}. {stats.pattern:<20} {stats.count:>7,}  (e.g. {stats.example})\n")
            f.write(f"     {format_word_list(stats.words, PREVIEW_WORDS)}\n")

    write_file_safely(filepath, write_patterns, "writing patterns report")


def generate_doubles_report(result: AnalysisResult, report_dir: Path) -> None:
    """List doubled consonant pairs with example words."""
    filepath = report_dir / "doubles.txt"

    def write_doubles(f):
        write_report_header(f, "DOUBLED CONSONANTS")
        if not result.double_letters:
            f.write("No doubled consonants found.\n")
            return

        for stats in result.double_letters:
            examples = ", ".join(stats.examples)
            f.write(f"{stats.pair.upper():<4} {stats.count:>7,}  {examples}\n")

    write_file_safely(filepath, write_doubles, "writing doubles report")


def generate_vowels_report(result: AnalysisResult, report_dir: Path) -> None:
    """Describe the 5, 4 and 3 distinct-vowel groups."""
    filepath = report_dir / "vowels.txt"

    def write_vowels(f):
        write_report_header(f, "VOWEL RICHNESS")
        for group in result.vowel_counts:
            write_subsection_header(f, f"{group.count} DISTINCT VOWELS", width=70)
            f.write(f"Words:     {len(group.words):,}\n")
            f.write(f"Longest:   {group.longest or '-'}\n")
            f.write(f"Shortest:  {group.shortest or '-'}\n")
            if group.words:
                f.write(f"Sample:    {format_word_list(group.words, PREVIEW_WORDS)}\n")
            f.write("\n")

    write_file_safely(filepath, write_vowels, "writing vowels report")
