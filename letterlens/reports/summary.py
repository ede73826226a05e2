"""Summary report generation."""

from pathlib import Path

from letterlens.reports.data import ReportData
from letterlens.reports.helpers import format_time, write_report_header, write_subsection_header
from letterlens.utils import write_file_safely

TOP_LETTERS = 10


def generate_summary_report(data: ReportData, report_dir: Path) -> None:
    """Generate summary report."""
    filepath = report_dir / "summary.txt"
    result = data.result
    total_time = sum(data.stage_times.values())

    def write_summary_content(f):
        write_report_header(f, "LETTER ANALYSIS SUMMARY")

        write_subsection_header(f, "INPUT", width=70)
        for source in data.sources:
            f.write(f"Source:                             {source}\n")
        f.write(f"Entries loaded:                     {data.entries_loaded:,}\n")
        f.write(f"Non-string entries ignored:         {data.skipped_entries:,}\n")
        if result is not None:
            f.write(f"Words analyzed:                     {result.total_words:,}\n")
        f.write("\n")

        if result is not None:
            write_subsection_header(f, "TOP LETTERS", width=70)
            f.write(f"{'Overall':<17} {'Start':<17} {'Middle':<17} {'End':<17}\n")
            views = (result.overall, result.starts_with, result.in_middle, result.ends_with)
            for row in zip(*(view[:TOP_LETTERS] for view in views)):
                f.write(" ".join(f"{item.letter} {item.count:<15,}" for item in row).rstrip())
                f.write("\n")
            f.write("\n")

            write_subsection_header(f, "HIGHLIGHTS", width=70)
            f.write(f"Distinct patterns (top kept):       {len(result.patterns):,}\n")
            f.write(f"Doubled consonant pairs:            {len(result.double_letters):,}\n")
            for group in result.vowel_counts:
                f.write(f"Words with {group.count} distinct vowels:       {len(group.words):,}\n")
            f.write("\n")

        if data.stage_times:
            write_subsection_header(f, "TIMING BREAKDOWN", width=70)
            for stage, duration in data.stage_times.items():
                pct = (duration / total_time * 100) if total_time > 0 else 0
                f.write(f"{stage:<35} {format_time(duration):>12} ({pct:>5.1f}%)\n")
            f.write("-" * 70 + "\n")
            f.write(f"{'Total':<35} {format_time(total_time):>12}\n")

    write_file_safely(filepath, write_summary_content, "writing summary report")
