"""Positional letter counting."""

import math
from typing import Iterable

from letterlens.core.models import LetterTally
from letterlens.utils.constants import Constants


def _zeroed() -> dict[str, int]:
    return dict.fromkeys(Constants.ALPHABET, 0)


def count_positions(words: Iterable[str]) -> LetterTally:
    """Tally each letter by position class.

    The first letter of a word counts toward ``begin`` and the last toward
    ``end``, both adding to ``total``. A one-letter word therefore adds 2 to
    its letter's total. Interior letters count toward ``middle`` only for
    words longer than two letters.

    Args:
        words: Clean lowercase words

    Returns:
        LetterTally with all 26 letters present
    """
    total = _zeroed()
    begin = _zeroed()
    middle = _zeroed()
    end = _zeroed()

    for word in words:
        first = word[0]
        last = word[-1]

        begin[first] += 1
        total[first] += 1

        end[last] += 1
        total[last] += 1

        if len(word) > 2:
            for char in word[1:-1]:
                middle[char] += 1
                total[char] += 1

    return LetterTally(total=total, begin=begin, middle=middle, end=end)


def percent(part: int, total: int) -> int:
    """Share of ``part`` in ``total`` as a whole percentage.

    Halves round up (12.5 -> 13). Returns 0 when ``total`` is 0.
    """
    if not total:
        return 0
    return math.floor(part / total * 100 + 0.5)
