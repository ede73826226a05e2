"""Report generation for the analysis pipeline."""

from datetime import datetime
from pathlib import Path

from loguru import logger

from letterlens.reports.data import ReportData
from letterlens.reports.letters import generate_letters_csv
from letterlens.reports.patterns import (
    generate_doubles_report,
    generate_patterns_report,
    generate_vowels_report,
)
from letterlens.reports.statistics import generate_statistics_csv
from letterlens.reports.summary import generate_summary_report


def create_report_directory(reports_path: str) -> Path:
    """Create a timestamped report directory.

    Args:
        reports_path: Base path for reports directory

    Returns:
        Path to the created report directory
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    report_dir = Path(reports_path) / timestamp
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def generate_reports(
    data: ReportData,
    reports_path: str | Path,
    verbose: bool = False,
    report_dir: Path | None = None,
) -> Path:
    """Generate all reports in a timestamped directory.

    Args:
        data: Report data collected during pipeline execution
        reports_path: Base path for reports directory (used if report_dir is None)
        verbose: Whether to print progress messages
        report_dir: Optional pre-created report directory. If None, creates a new one.

    Returns:
        Path to the report directory
    """
    if report_dir is None:
        report_dir = create_report_directory(str(reports_path))

    if verbose:
        logger.info(f"  Generating reports in: {report_dir}/")

    report_count = 0
    generate_summary_report(data, report_dir)
    generate_statistics_csv(data, report_dir)
    report_count += 2

    if data.result is not None:
        generate_letters_csv(data.result, report_dir)
        generate_patterns_report(data.result, report_dir)
        generate_doubles_report(data.result, report_dir)
        generate_vowels_report(data.result, report_dir)
        report_count += 4

    if verbose:
        logger.info(f"  Generated {report_count} report files")

    return report_dir
