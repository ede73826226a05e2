"""Report generation."""

from letterlens.reports.core import create_report_directory, generate_reports
from letterlens.reports.data import ReportData
from letterlens.reports.helpers import format_time

__all__ = [
    "ReportData",
    "create_report_directory",
    "format_time",
    "generate_reports",
]
