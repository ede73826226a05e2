"""Processing pipeline."""

from letterlens.processing.pipeline import run_pipeline

__all__ = ["run_pipeline"]
