"""Word list loading and export."""

import json
from pathlib import Path
import re
from typing import Any, Iterable

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger
from wordfreq import top_n_list

from letterlens.utils import Constants, expand_file_path, write_file_safely

# Line boundaries for str.splitlines, split by whether normalize treats them as separators
_SPACED_BREAK_RE = re.compile("[\n\r\v\f\u2028\u2029]+")
_DROPPED_BREAK_RE = re.compile("[\x1c\x1d\x1e\x85]")


def load_source_words(top_n: int | None, verbose: bool = False) -> list[str]:
    """Get the top N most common English words from wordfreq."""
    if not top_n:
        return []

    if verbose:
        logger.info(f"  Loading top {top_n} words from wordfreq...")

    try:
        return list(top_n_list(Constants.WORDFREQ_LANG, top_n))
    except Exception as e:
        logger.error(f"✗ Failed to load words from wordfreq: {e}")
        logger.error("  This may indicate a problem with the 'wordfreq' package")
        raise RuntimeError("Failed to load source words from wordfreq") from e


def load_dictionary_words(verbose: bool = False) -> list[str]:
    """Get ALL words from the english-words dictionary, sorted for deterministic output."""
    if verbose:
        logger.info("  Loading ALL words from english-words dictionary...")

    try:
        # type: ignore[no-any-return]
        words: set[str] = get_english_words_set(list(Constants.ENGLISH_WORDS_SOURCES), lower=True)
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load english-words dictionary") from e

    if verbose:
        logger.info(f"  Loaded {len(words)} words from english-words dictionary")

    return sorted(words)


def _parse_json_entries(filepath: str, text: str) -> list[Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"✗ Invalid JSON in word list {filepath}: {e}")
        logger.error("  Please validate your JSON syntax")
        raise ValueError(f"Invalid JSON word list: {e}") from e

    if not isinstance(data, list):
        logger.error(f"✗ JSON word list must be an array: {filepath}")
        raise ValueError(f"JSON word list must be an array, got {type(data).__name__}")
    return data


def _parse_text_entries(text: str) -> list[str]:
    entries = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith(Constants.COMMENT_PREFIX):
            entries.append(line)
    return entries


def load_word_list(filepath: str | None, verbose: bool = False) -> list[Any]:
    """Load raw entries from a word list file.

    ``.json`` files must hold an array; its items are returned as-is, so
    non-string items reach the analysis and are ignored there. Any other
    file is read as one entry per line, skipping blanks and ``#`` comments.
    """
    if not filepath:
        return []

    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if Path(filepath).suffix.lower() == ".json":
        entries = _parse_json_entries(filepath, text)
    else:
        entries = _parse_text_entries(text)

    if verbose:
        logger.info(f"  Loaded {len(entries)} entries from {filepath}")

    return entries


def _flatten_entry(entry: str) -> str:
    """Keep an entry on one line without changing how it normalizes."""
    return _DROPPED_BREAK_RE.sub("", _SPACED_BREAK_RE.sub(" ", entry))


def write_word_list_dump(entries: Iterable[Any], filepath: str | Path) -> int:
    """Write string entries one per line as a downloadable text dump.

    Line breaks inside an entry that also separate words become a space;
    the remaining ``str.splitlines`` boundaries are removed.

    Returns:
        Number of lines written
    """
    lines = [_flatten_entry(entry) for entry in entries if isinstance(entry, str)]

    def write_lines(f):
        for line in lines:
            f.write(f"{line}\n")

    write_file_safely(filepath, write_lines, "writing word list dump")
    return len(lines)
