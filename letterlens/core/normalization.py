"""Normalization of raw input entries into clean words."""

import re
from typing import Any, Iterable

from letterlens.core.types import StringEntry, to_entry

# Phrases and hyphenated compounds become separate words. The separator set is
# ECMAScript whitespace plus "-": it includes U+FEFF and excludes U+001C-U+001F
# and U+0085, unlike Python's Unicode \s.
_SPLIT_RE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff-]+"
)
_NON_ALPHA_RE = re.compile(r"[^a-z]")


def clean_token(token: str) -> str:
    """Strip every character outside a-z from a lowercase token."""
    return _NON_ALPHA_RE.sub("", token)


def normalize(raw_list: Iterable[Any]) -> list[str]:
    """Turn raw entries into a flat list of clean lowercase words.

    Non-string entries are skipped. Each string is lowercased, split on runs
    of whitespace or hyphens, and stripped of non-alphabetic characters.
    Empty results are dropped. Input order is kept and repeats are not
    removed.

    Args:
        raw_list: Ordered sequence of raw entries of any type

    Returns:
        List of words made only of the letters a-z, each at least one long
    """
    words = []
    for item in raw_list:
        entry = to_entry(item)
        if not isinstance(entry, StringEntry):
            continue
        for token in _SPLIT_RE.split(entry.text.lower()):
            clean = clean_token(token)
            if clean:
                words.append(clean)
    return words


def count_skipped_entries(raw_list: Iterable[Any]) -> int:
    """Count raw entries that normalization ignores because they are not strings."""
    return sum(1 for item in raw_list if not isinstance(to_entry(item), StringEntry))
