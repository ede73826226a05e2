"""Stage 2: Letter analysis with optional multiprocessing."""

from functools import partial
from multiprocessing import Pool
import time
from typing import Any, Callable

from loguru import logger
from tqdm import tqdm

from letterlens.core import (
    Config,
    assemble,
    classify_patterns,
    count_positions,
    detect_doubles,
    group_by_vowel_richness,
    normalize,
)
from letterlens.processing.stages.data_models import AnalysisData, WordListData


def _timed(func: Callable[[list[str]], Any], words: list[str]) -> tuple[Any, float]:
    """Run one aggregation and measure it."""
    start = time.time()
    value = func(words)
    return value, time.time() - start


def build_aggregations(config: Config) -> dict[str, Callable[[list[str]], Any]]:
    """Independent aggregations over the normalized words, keyed by name."""
    return {
        "positions": count_positions,
        "patterns": classify_patterns,
        "doubles": partial(detect_doubles, example_limit=config.example_limit),
        "vowels": group_by_vowel_richness,
    }


def _run_single_threaded(
    aggregations: dict[str, Callable], words: list[str], verbose: bool
) -> dict[str, tuple[Any, float]]:
    names: Any = list(aggregations)
    if verbose:
        names = tqdm(names, desc="Analyzing words", unit="stage")

    return {name: _timed(aggregations[name], words) for name in names}


def _run_multiprocessing(
    aggregations: dict[str, Callable], words: list[str], jobs: int, verbose: bool
) -> dict[str, tuple[Any, float]]:
    """Run aggregations in worker processes.

    Every worker receives the full word list in input order, so first-seen
    examples do not depend on scheduling. Results are joined by name.
    """
    processes = min(jobs, len(aggregations))
    if verbose:
        logger.info(f"  Using {processes} parallel workers")

    with Pool(processes=processes) as pool:
        pending = {
            name: pool.apply_async(_timed, (func, words)) for name, func in aggregations.items()
        }
        names: Any = list(pending)
        if verbose:
            names = tqdm(names, desc="Analyzing words", unit="stage")
        return {name: pending[name].get() for name in names}


def run_analysis(
    word_data: WordListData, config: Config, verbose: bool = False
) -> AnalysisData:
    """Normalize the loaded entries and compute the full letter profile.

    Args:
        word_data: Output of the word loading stage
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        AnalysisData holding the assembled result
    """
    start_time = time.time()

    words = normalize(word_data.entries)
    if verbose:
        logger.info(f"  Normalized {len(word_data.entries)} entries into {len(words)} words")

    aggregations = build_aggregations(config)
    if config.jobs > 1 and words:
        outputs = _run_multiprocessing(aggregations, words, config.jobs, verbose)
    else:
        outputs = _run_single_threaded(aggregations, words, verbose)

    for name, (_, duration) in outputs.items():
        logger.debug(f"Aggregation '{name}' took {duration:.4f}s")

    result = assemble(
        outputs["positions"][0],
        outputs["patterns"][0],
        outputs["doubles"][0],
        outputs["vowels"][0],
        total_words=len(words),
        pattern_limit=config.pattern_limit,
    )

    return AnalysisData(
        result=result,
        words_processed=len(words),
        stage_times={name: duration for name, (_, duration) in outputs.items()},
        elapsed_time=time.time() - start_time,
    )
