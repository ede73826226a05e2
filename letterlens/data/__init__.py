"""Word list sources."""

from letterlens.data.wordlist import (
    load_dictionary_words,
    load_source_words,
    load_word_list,
    write_word_list_dump,
)

__all__ = [
    "load_dictionary_words",
    "load_source_words",
    "load_word_list",
    "write_word_list_dump",
]
