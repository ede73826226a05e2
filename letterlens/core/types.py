"""Type definitions for LetterLens."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StringEntry:
    """Raw input entry that carries text and goes on to normalization."""

    text: str


@dataclass(frozen=True)
class OtherEntry:
    """Raw input entry of any other type. Ignored by the analysis."""

    value: Any


# Raw input entry after discrimination at the boundary
RawEntry = StringEntry | OtherEntry


def to_entry(item: Any) -> RawEntry:
    """Discriminate a raw input item into a string or non-string entry."""
    if isinstance(item, str):
        return StringEntry(item)
    return OtherEntry(item)
