"""Report data models."""

from dataclasses import dataclass, field

from letterlens.core import AnalysisResult


@dataclass
class ReportData:
    """Collects data throughout the pipeline for reporting."""

    # Timing
    stage_times: dict[str, float] = field(default_factory=dict)
    aggregation_times: dict[str, float] = field(default_factory=dict)
    start_time: float = 0.0

    # Inputs
    sources: list[str] = field(default_factory=list)
    entries_loaded: int = 0
    skipped_entries: int = 0

    result: AnalysisResult | None = None
