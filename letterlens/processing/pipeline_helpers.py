"""Helper functions for pipeline setup."""

from pathlib import Path

from loguru import logger

from letterlens.core import Config
from letterlens.reports import ReportData, create_report_directory
from letterlens.utils import add_log_file_handler


def setup_reporting(config: Config, start_time: float) -> tuple[ReportData | None, Path | None]:
    """Set up reporting infrastructure if enabled.

    Args:
        config: Configuration object
        start_time: Pipeline start time

    Returns:
        Tuple of (report_data, report_dir) or (None, None) if reports disabled
    """
    if not config.reports:
        return None, None

    report_data = ReportData(start_time=start_time)
    report_dir = create_report_directory(config.reports)

    # Directory name is the timestamp: YYYY-MM-DD_HH-MM-SS
    log_file = report_dir / f"letterlens-{report_dir.name}.log"
    add_log_file_handler(log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info(f"Logs will be saved to: {log_file}")
        logger.info("")

    return report_data, report_dir
