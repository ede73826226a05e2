"""Statistics CSV report generation."""

from pathlib import Path

from letterlens.reports.data import ReportData
from letterlens.utils import write_file_safely


def generate_statistics_csv(data: ReportData, report_dir: Path) -> None:
    """Generate machine-readable statistics CSV."""
    filepath = report_dir / "statistics.csv"
    result = data.result

    def write_statistics(f):
        f.write("metric,value\n")
        f.write(f"entries_loaded,{data.entries_loaded}\n")
        f.write(f"skipped_entries,{data.skipped_entries}\n")
        if result is not None:
            f.write(f"total_words,{result.total_words}\n")
            f.write(f"patterns_ranked,{len(result.patterns)}\n")
            f.write(f"double_letter_pairs,{len(result.double_letters)}\n")
            for group in result.vowel_counts:
                f.write(f"words_with_{group.count}_vowels,{len(group.words)}\n")

        for stage, duration in data.stage_times.items():
            stage_key = stage.lower().replace(" ", "_")
            f.write(f"time_{stage_key},{duration:.3f}\n")
        for name, duration in data.aggregation_times.items():
            f.write(f"time_aggregation_{name},{duration:.3f}\n")
        total_time = sum(data.stage_times.values())
        f.write(f"time_total,{total_time:.3f}\n")

    write_file_safely(filepath, write_statistics, "writing statistics report")
