"""Main processing pipeline orchestration."""

import time

from loguru import logger

from letterlens.core import AnalysisResult, Config
from letterlens.processing.pipeline_helpers import setup_reporting
from letterlens.processing.stages import load_words, run_analysis, write_output
from letterlens.reports import format_time, generate_reports


def run_pipeline(config: Config) -> AnalysisResult:
    """Load words, analyze them, write the result and optional reports.

    Args:
        config: Configuration object containing all settings

    Returns:
        The assembled AnalysisResult
    """
    start_time = time.time()
    verbose = config.verbose

    report_data, report_dir = setup_reporting(config, start_time)

    # Stage 1: Load word list
    if verbose:
        logger.info("Stage 1: Loading words...")
    word_data = load_words(config, verbose)

    # Stage 2: Analyze
    if verbose:
        logger.info("Stage 2: Analyzing letters...")
    analysis = run_analysis(word_data, config, verbose)

    # Stage 3: Output
    if verbose:
        logger.info("Stage 3: Writing output...")
    output_start = time.time()
    write_output(analysis.result, word_data, config, verbose)
    output_time = time.time() - output_start

    if report_data is not None and report_dir is not None:
        report_data.stage_times = {
            "Word loading": word_data.elapsed_time,
            "Analysis": analysis.elapsed_time,
            "Output": output_time,
        }
        report_data.aggregation_times = dict(analysis.stage_times)
        report_data.sources = list(word_data.sources)
        report_data.entries_loaded = len(word_data.entries)
        report_data.skipped_entries = word_data.skipped_entries
        report_data.result = analysis.result

        if verbose:
            logger.info("Stage 4: Generating reports...")
        generate_reports(report_data, config.reports or "", verbose, report_dir=report_dir)

    if verbose:
        logger.info(f"Analyzed {analysis.words_processed:,} words")
        logger.info(f"Total processing time: {format_time(time.time() - start_time)}")

    return analysis.result
