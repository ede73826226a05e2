"""Unit tests for raw input normalization.

Tests verify how raw entries become clean words. Each test has a single
assertion and focuses on behavior.
"""

from letterlens.core import OtherEntry, StringEntry, normalize, to_entry
from letterlens.core.normalization import clean_token, count_skipped_entries


class TestToEntry:
    """Test discrimination of raw entries."""

    def test_string_becomes_string_entry(self) -> None:
        """String items are wrapped as StringEntry."""
        assert to_entry("word") == StringEntry("word")

    def test_number_becomes_other_entry(self) -> None:
        """Non-string items are wrapped as OtherEntry."""
        assert isinstance(to_entry(42), OtherEntry)

    def test_bytes_become_other_entry(self) -> None:
        """Bytes are not text and are not normalized."""
        assert isinstance(to_entry(b"word"), OtherEntry)


class TestCleanToken:
    """Test stripping of non-alphabetic characters."""

    def test_removes_apostrophes(self) -> None:
        """Apostrophes inside a token are dropped."""
        assert clean_token("don't") == "dont"

    def test_removes_digits(self) -> None:
        """Digits are dropped."""
        assert clean_token("abc123") == "abc"

    def test_removes_accented_letters(self) -> None:
        """Letters outside a-z are dropped, not transliterated."""
        assert clean_token("café") == "caf"


class TestNormalize:
    """Test normalize behavior."""

    def test_lowercases_words(self) -> None:
        """Uppercase input is lowercased."""
        assert normalize(["HeLLo"]) == ["hello"]

    def test_splits_phrases_on_whitespace(self) -> None:
        """A phrase yields one word per whitespace-separated token."""
        assert normalize(["thank you"]) == ["thank", "you"]

    def test_splits_on_hyphens(self) -> None:
        """Hyphenated compounds yield separate words."""
        assert normalize(["well-known"]) == ["well", "known"]

    def test_collapses_runs_of_separators(self) -> None:
        """Runs of whitespace and hyphens act as one separator."""
        assert normalize(["  multiple \t spaces--and-hyphens "]) == [
            "multiple",
            "spaces",
            "and",
            "hyphens",
        ]

    def test_splits_on_zero_width_no_break_space(self) -> None:
        """U+FEFF separates words."""
        assert normalize(["ab\ufeffcd"]) == ["ab", "cd"]

    def test_splits_on_no_break_space(self) -> None:
        """U+00A0 separates words."""
        assert normalize(["ab\u00a0cd"]) == ["ab", "cd"]

    def test_information_separator_does_not_split(self) -> None:
        """U+001C is stripped as a non-letter, not treated as a separator."""
        assert normalize(["ab\x1ccd"]) == ["abcd"]

    def test_next_line_character_does_not_split(self) -> None:
        """U+0085 is stripped as a non-letter, not treated as a separator."""
        assert normalize(["ab\x85cd"]) == ["abcd"]

    def test_skips_non_string_entries(self) -> None:
        """Numbers, None and containers are ignored silently."""
        assert normalize([42, None, "cat", ["dog"], {"a": 1}]) == ["cat"]

    def test_drops_tokens_without_letters(self) -> None:
        """Tokens that are empty after stripping are discarded."""
        assert normalize(["123", "!!!", "- -"]) == []

    def test_keeps_repeated_words(self) -> None:
        """Repeats are not deduplicated."""
        assert normalize(["the", "The"]) == ["the", "the"]

    def test_preserves_input_order(self) -> None:
        """Output order follows input order."""
        assert normalize(["zebra", "apple mango"]) == ["zebra", "apple", "mango"]

    def test_empty_input_gives_empty_list(self) -> None:
        """Empty input normalizes to nothing."""
        assert normalize([]) == []

    def test_every_word_is_lowercase_alphabetic(self) -> None:
        """All produced words are non-empty and made of a-z only."""
        words = normalize(["It's", "O'Neil-Smith", "x2y", "ÆON", 7])
        assert all(word and word.isascii() and word.isalpha() and word.islower() for word in words)


class TestCountSkippedEntries:
    """Test counting of ignored entries."""

    def test_counts_non_string_entries(self) -> None:
        """Every non-string entry is counted."""
        assert count_skipped_entries([1, "a", None, 2.5]) == 3
