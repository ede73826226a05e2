"""Per-letter breakdown CSV generation."""

from pathlib import Path

from letterlens.core import AnalysisResult
from letterlens.utils import write_file_safely


def generate_letters_csv(result: AnalysisResult, report_dir: Path) -> None:
    """Write the breakdown table, one row per letter in breakdown order."""
    filepath = report_dir / "letters.csv"

    def write_letters(f):
        f.write("letter,total,begin,begin_pct,middle,middle_pct,end,end_pct\n")
        for row in result.breakdown:
            f.write(
                f"{row.letter},{row.total},{row.begin},{row.begin_pct},"
                f"{row.middle},{row.middle_pct},{row.end},{row.end_pct}\n"
            )

    write_file_safely(filepath, write_letters, "writing letters report")
