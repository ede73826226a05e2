"""Unit tests for vowel richness grouping.

Each test has a single assertion and focuses on behavior.
"""

from letterlens.core import get_unique_vowels, group_by_vowel_richness


class TestGetUniqueVowels:
    """Test distinct vowel extraction."""

    def test_ignores_repeats(self) -> None:
        """'banana' uses only 'a'."""
        assert get_unique_vowels("banana") == {"a"}

    def test_ignores_consonants(self) -> None:
        """'rhythm' has no vowels."""
        assert get_unique_vowels("rhythm") == set()


class TestGroupByVowelRichness:
    """Test bucket routing and summaries."""

    def test_buckets_in_fixed_order(self) -> None:
        """Buckets come out as 5, 4, 3."""
        assert [group.count for group in group_by_vowel_richness([])] == [5, 4, 3]

    def test_routes_five_vowel_words(self) -> None:
        """'education' uses all five vowels."""
        assert group_by_vowel_richness(["education"])[0].words == ("education",)

    def test_routes_four_vowel_words(self) -> None:
        """'audio' uses four distinct vowels."""
        assert group_by_vowel_richness(["audio"])[1].words == ("audio",)

    def test_routes_three_vowel_words(self) -> None:
        """'radio' uses three distinct vowels."""
        assert group_by_vowel_richness(["radio"])[2].words == ("radio",)

    def test_excludes_two_vowel_words(self) -> None:
        """Words with exactly two distinct vowels appear in no bucket."""
        groups = group_by_vowel_richness(["tea", "queue"])
        assert all(not group.words for group in groups)

    def test_word_appears_in_one_bucket(self) -> None:
        """A word is routed to a single bucket."""
        groups = group_by_vowel_richness(["sequoia", "audio", "radio"])
        assert sum(len(group.words) for group in groups) == 3

    def test_longest_is_first_of_maximal_length(self) -> None:
        """Ties on length go to the earlier word."""
        assert group_by_vowel_richness(["piano", "radio", "oboe"])[2].longest == "piano"

    def test_shortest_is_first_of_minimal_length(self) -> None:
        """Ties on length go to the earlier word."""
        assert group_by_vowel_richness(["potatoes", "radio", "piano"])[2].shortest == "radio"

    def test_longest_picks_longer_word(self) -> None:
        """The longest word wins regardless of position."""
        assert group_by_vowel_richness(["radio", "potatoes"])[2].longest == "potatoes"

    def test_empty_bucket_has_empty_longest(self) -> None:
        """An empty bucket reports an empty longest word."""
        assert group_by_vowel_richness([])[0].longest == ""

    def test_empty_bucket_has_empty_shortest(self) -> None:
        """An empty bucket reports an empty shortest word."""
        assert group_by_vowel_richness([])[0].shortest == ""
