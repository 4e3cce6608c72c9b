"""Letter frequency analysis over the built-in word lists."""

import string
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple
from pydantic import BaseModel

from ..data import all_words
from ..engine.models import NUM_COLUMNS, is_vowel


class LetterStats(BaseModel):
    """Frequency statistics for one letter."""
    letter: str
    frequency_in_word_list: float  # Share of words containing the letter
    avg_words_per_puzzle: float  # Expected columns containing it
    is_vowel: bool


def analyze_letter_frequencies(words: Optional[Iterable[str]] = None) -> List[LetterStats]:
    """
    Share of words containing each letter, most frequent first.

    Args:
        words: Word list to analyse (defaults to the built-in lists)

    Returns:
        One LetterStats per letter A-Z, sorted by frequency descending
    """
    word_list = [w.upper() for w in (words if words is not None else all_words())]
    total = len(word_list) or 1

    stats = []
    for letter in string.ascii_uppercase:
        containing = sum(1 for w in word_list if letter in w)
        frequency = containing / total
        stats.append(LetterStats(
            letter=letter,
            frequency_in_word_list=frequency,
            avg_words_per_puzzle=frequency * NUM_COLUMNS,
            is_vowel=is_vowel(letter),
        ))

    # Stable sort keeps alphabetical order between equal frequencies
    return sorted(stats, key=lambda s: s.frequency_in_word_list, reverse=True)


@lru_cache(maxsize=1)
def _ranked_letters() -> Tuple[str, ...]:
    return tuple(s.letter for s in analyze_letter_frequencies())


def letters_by_expected_value() -> List[str]:
    """All letters, best first."""
    return list(_ranked_letters())


def vowels_by_expected_value() -> List[str]:
    return [letter for letter in _ranked_letters() if is_vowel(letter)]


def consonants_by_expected_value() -> List[str]:
    return [letter for letter in _ranked_letters() if not is_vowel(letter)]


def count_letter_hits(letter: str, words: Iterable[str]) -> int:
    """Number of words containing the letter past their first position."""
    letter = letter.upper()
    return sum(1 for w in words if letter in w.upper()[1:])
