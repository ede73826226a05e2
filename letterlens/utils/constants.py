"""Project-wide constants."""

import string


class Constants:
    """Constants shared by the analysis engine and its collaborators."""

    ALPHABET = string.ascii_lowercase
    VOWELS = frozenset("aeiou")

    VOWEL_SYMBOL = "V"
    CONSONANT_SYMBOL = "C"

    # Distinct-vowel counts that get a bucket, in output order
    TRACKED_VOWEL_COUNTS = (5, 4, 3)

    PATTERN_LIMIT = 20
    EXAMPLE_LIMIT = 5

    WORDFREQ_LANG = "en"
    ENGLISH_WORDS_SOURCES = ("web2", "gcide")

    COMMENT_PREFIX = "#"
