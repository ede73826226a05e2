"""Stage 1: Word list loading."""

import time

from loguru import logger

from letterlens.core import Config
from letterlens.core.normalization import count_skipped_entries
from letterlens.data import load_dictionary_words, load_source_words, load_word_list
from letterlens.processing.stages.data_models import WordListData


def load_words(config: Config, verbose: bool = False) -> WordListData:
    """Collect raw entries from every configured source.

    Sources are concatenated in a fixed order: wordfreq top N, the
    english-words dictionary, then the include file.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        WordListData with the raw entries in source order
    """
    start_time = time.time()

    entries: list = []
    sources: list[str] = []

    if config.top_n:
        entries.extend(load_source_words(config.top_n, verbose))
        sources.append(f"wordfreq top {config.top_n}")

    if config.all_words:
        entries.extend(load_dictionary_words(verbose))
        sources.append("english-words dictionary")

    if config.include:
        user_entries = load_word_list(config.include, verbose)
        entries.extend(user_entries)
        sources.append(config.include)

    skipped = count_skipped_entries(entries)
    if skipped:
        logger.warning(f"  Ignoring {skipped} non-string entries")

    if verbose:
        logger.info(f"  Collected {len(entries)} entries from {len(sources)} source(s)")

    return WordListData(
        entries=entries,
        sources=sources,
        skipped_entries=skipped,
        elapsed_time=time.time() - start_time,
    )
