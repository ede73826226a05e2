"""Unit tests for positional letter counting.

Tests verify begin/middle/end tallies and percentage rounding. Each test has a
single assertion.
"""

from letterlens.core import count_positions, percent


class TestCountPositions:
    """Test count_positions behavior."""

    def test_initializes_all_26_letters(self) -> None:
        """Tally covers every letter even with no words."""
        assert len(count_positions([]).total) == 26

    def test_empty_input_is_all_zero(self) -> None:
        """No words means every count is zero."""
        assert sum(count_positions([]).total.values()) == 0

    def test_single_letter_word_counts_twice_in_total(self) -> None:
        """A one-letter word adds to total once as begin and once as end."""
        assert count_positions(["a"]).total["a"] == 2

    def test_single_letter_word_is_begin(self) -> None:
        """A one-letter word counts as begin."""
        assert count_positions(["a"]).begin["a"] == 1

    def test_single_letter_word_is_end(self) -> None:
        """A one-letter word counts as end."""
        assert count_positions(["a"]).end["a"] == 1

    def test_single_letter_word_is_not_middle(self) -> None:
        """A one-letter word never counts as middle."""
        assert count_positions(["a"]).middle["a"] == 0

    def test_two_letter_word_has_no_middle(self) -> None:
        """Words of length two contribute nothing to middle."""
        assert sum(count_positions(["ab"]).middle.values()) == 0

    def test_counts_interior_letters_as_middle(self) -> None:
        """Interior letters of a three-letter word count as middle."""
        assert count_positions(["cat"]).middle["a"] == 1

    def test_counts_first_letter_as_begin(self) -> None:
        """First letter counts as begin."""
        assert count_positions(["cat"]).begin["c"] == 1

    def test_counts_last_letter_as_end(self) -> None:
        """Last letter counts as end."""
        assert count_positions(["cat"]).end["t"] == 1

    def test_repeated_letter_counts_in_every_position(self) -> None:
        """'ttt' adds one begin, one middle and one end for 't'."""
        assert count_positions(["ttt"]).total["t"] == 3

    def test_accumulates_across_words(self) -> None:
        """Counts add up over all words."""
        assert count_positions(["sun", "sea", "sky"]).begin["s"] == 3

    def test_total_is_sum_of_positions(self) -> None:
        """For every letter, total equals begin + middle + end."""
        tally = count_positions(["a", "to", "bookkeeper", "mississippi", "rhythm"])
        assert all(
            tally.total[c] == tally.begin[c] + tally.middle[c] + tally.end[c] for c in tally.total
        )


class TestPercent:
    """Test percentage rounding."""

    def test_zero_total_gives_zero(self) -> None:
        """Division by zero is guarded."""
        assert percent(0, 0) == 0

    def test_rounds_half_up(self) -> None:
        """12.5% rounds up to 13."""
        assert percent(1, 8) == 13

    def test_rounds_half_up_past_even(self) -> None:
        """62.5% rounds up to 63 rather than to the even 62."""
        assert percent(5, 8) == 63

    def test_rounds_down_below_half(self) -> None:
        """33.3% rounds down to 33."""
        assert percent(1, 3) == 33

    def test_rounds_up_above_half(self) -> None:
        """66.7% rounds up to 67."""
        assert percent(2, 3) == 67

    def test_full_share_is_100(self) -> None:
        """Part equal to total is 100%."""
        assert percent(4, 4) == 100
