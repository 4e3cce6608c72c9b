"""Bundled word data."""

from .words import (
    FOUR_LETTER_WORDS,
    FIVE_LETTER_WORDS,
    SIX_LETTER_WORDS,
    WORDS_BY_LENGTH,
    CASCADE_WORDS,
    all_words,
    words_of_length,
)

__all__ = [
    "FOUR_LETTER_WORDS",
    "FIVE_LETTER_WORDS",
    "SIX_LETTER_WORDS",
    "WORDS_BY_LENGTH",
    "CASCADE_WORDS",
    "all_words",
    "words_of_length",
]
