"""Data models for passing information between pipeline stages."""

from typing import Any

from pydantic import BaseModel, Field

from letterlens.core import AnalysisResult


class StageResult(BaseModel):
    """Base class for stage results with timing."""

    elapsed_time: float = Field(0.0, ge=0)


class WordListData(StageResult):
    """Output from word loading stage."""

    entries: list[Any] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    skipped_entries: int = Field(0, ge=0)


class AnalysisData(StageResult):
    """Output from analysis stage."""

    result: AnalysisResult
    words_processed: int = Field(0, ge=0)
    stage_times: dict[str, float] = Field(default_factory=dict)
