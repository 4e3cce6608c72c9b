"""Letter guess engine."""

import string

from .errors import GuessLimitExceeded, InvalidAction, LetterAlreadyGuessed, VowelLimitExceeded
from .models import Puzzle, is_vowel
from .phases import enter_word_phase, require_phase
from .scoring import current_streak, is_hit, streak_bonus


def normalize_letter(letter: str) -> str:
    """Upper-case a single A-Z letter, rejecting anything else."""
    if not isinstance(letter, str) or len(letter) != 1 or letter.upper() not in string.ascii_uppercase:
        raise InvalidAction(f"Letter guesses must be a single letter A-Z, got {letter!r}")
    return letter.upper()


def check_letter_guess(puzzle: Puzzle, letter: str) -> str:
    """
    Validate a letter guess without applying it.

    Returns:
        The normalised letter

    Raises:
        PhaseMismatch, InvalidAction, LetterAlreadyGuessed,
        GuessLimitExceeded, VowelLimitExceeded
    """
    require_phase(puzzle, "guessing-letters", "guess_letter")
    letter = normalize_letter(letter)
    if letter in puzzle.guessed_letters:
        raise LetterAlreadyGuessed(f"'{letter}' has already been guessed")
    if len(puzzle.guessed_letters) >= puzzle.config.max_letter_guesses:
        raise GuessLimitExceeded(f"All {puzzle.config.max_letter_guesses} letter guesses used")
    if is_vowel(letter) and puzzle.guessed_vowels >= puzzle.config.max_vowels:
        raise VowelLimitExceeded(f"All {puzzle.config.max_vowels} vowel guesses used")
    return letter


def guess_letter(puzzle: Puzzle, letter: str) -> Puzzle:
    """
    Guess one letter for every column at once.

    Reveals the letter at every position past the key letter, adds the
    streak bonus on a hit, marks newly completed words as auto-completed and
    moves to the word phase when the last guess is spent.

    Args:
        puzzle: Current puzzle
        letter: Letter to guess (case-insensitive)

    Returns:
        The updated puzzle
    """
    letter = check_letter_guess(puzzle, letter)

    bonus = 0
    if is_hit(puzzle.words, letter):
        bonus = streak_bonus(current_streak(puzzle) + 1, puzzle.config.scoring)

    words = []
    for w in puzzle.words:
        revealed = tuple(
            r or (i > 0 and ch == letter)
            for i, (ch, r) in enumerate(zip(w.word, w.revealed))
        )
        update = {"revealed": revealed}
        if all(revealed) and not w.auto_completed:
            update["auto_completed"] = True
        words.append(w.model_copy(update=update))

    updated = puzzle.model_copy(update={
        "guessed_letters": puzzle.guessed_letters + (letter,),
        "guessed_vowels": puzzle.guessed_vowels + (1 if is_vowel(letter) else 0),
        "words": tuple(words),
        "score": puzzle.score + bonus,
    })

    if len(updated.guessed_letters) >= updated.config.max_letter_guesses:
        updated = enter_word_phase(updated)
    return updated
