"""Result models for the letter analysis.

All models are frozen. Field names are snake_case in Python and serialize
with camelCase aliases (``model_dump(by_alias=True)``), which is the shape the
dashboard reads.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    """Base class for immutable result models."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class LetterCount(ResultModel):
    """A display letter with its count in one ranked view."""

    letter: str
    count: int = Field(ge=0)


class LetterTally(ResultModel):
    """Per-letter positional counts, keyed by all 26 lowercase letters."""

    total: dict[str, int]
    begin: dict[str, int]
    middle: dict[str, int]
    end: dict[str, int]


class LetterStats(ResultModel):
    """One row of the breakdown table."""

    letter: str
    total: int = Field(ge=0)
    begin: int = Field(ge=0)
    begin_pct: int = Field(ge=0)
    middle: int = Field(ge=0)
    middle_pct: int = Field(ge=0)
    end: int = Field(ge=0)
    end_pct: int = Field(ge=0)


class PatternStats(ResultModel):
    """Words sharing one vowel/consonant signature."""

    pattern: str
    count: int = Field(ge=0)
    example: str
    words: tuple[str, ...] = ()


class DoubleLetterStats(ResultModel):
    """Occurrences of one geminate consonant pair."""

    pair: str
    count: int = Field(ge=0)
    examples: tuple[str, ...] = ()


class VowelCountStats(ResultModel):
    """Words using exactly ``count`` distinct vowels."""

    count: int
    words: tuple[str, ...] = ()
    longest: str = ""
    shortest: str = ""


class AnalysisResult(ResultModel):
    """Complete letter usage profile of a word list."""

    total_words: int = Field(ge=0)
    overall: tuple[LetterCount, ...]
    starts_with: tuple[LetterCount, ...]
    ends_with: tuple[LetterCount, ...]
    in_middle: tuple[LetterCount, ...]
    breakdown: tuple[LetterStats, ...]
    patterns: tuple[PatternStats, ...]
    double_letters: tuple[DoubleLetterStats, ...]
    vowel_counts: tuple[VowelCountStats, ...]

    def to_dict(self) -> dict:
        """Serialize with the dashboard's field names."""
        return self.model_dump(mode="json", by_alias=True)
