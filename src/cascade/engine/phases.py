"""
Phase transitions: guessing-letters -> guessing-words -> complete.

Transitions are one-way. The letters -> words boundary freezes each word's
blank count for scoring; the words -> complete boundary settles the cascade.
"""

from .cascade import evaluate_cascade
from .errors import PhaseMismatch, SkipNotAllowed
from .models import Puzzle


def require_phase(puzzle: Puzzle, expected: str, operation: str) -> None:
    """Raise PhaseMismatch unless the puzzle is in the expected phase."""
    if puzzle.phase != expected:
        raise PhaseMismatch(operation, puzzle.phase, expected)


def can_skip_to_words(puzzle: Puzzle) -> bool:
    """Whether the player may move on to the word phase now."""
    if puzzle.phase != "guessing-letters":
        return False
    guessed = len(puzzle.guessed_letters)
    return guessed >= puzzle.config.min_letters_before_skip or guessed == puzzle.config.max_letter_guesses


def enter_word_phase(puzzle: Puzzle) -> Puzzle:
    """Freeze ``blanks_at_word_phase`` for every word and switch phase. No score change."""
    words = tuple(
        w.model_copy(update={
            "blanks_at_word_phase": w.blanks,
            "auto_completed": w.auto_completed or w.blanks == 0,
        })
        for w in puzzle.words
    )
    return puzzle.model_copy(update={
        "words": words,
        "phase": "guessing-words",
        "selected_word_index": None,
    })


def skip_to_words(puzzle: Puzzle) -> Puzzle:
    """
    End the letter phase early.

    Raises:
        PhaseMismatch: If the letter phase is already over
        SkipNotAllowed: If fewer than the minimum letters have been guessed
    """
    require_phase(puzzle, "guessing-letters", "skip")
    if not can_skip_to_words(puzzle):
        raise SkipNotAllowed(
            f"Guess at least {puzzle.config.min_letters_before_skip} letters before skipping "
            f"({len(puzzle.guessed_letters)} guessed)"
        )
    return enter_word_phase(puzzle)


def complete(puzzle: Puzzle) -> Puzzle:
    """Settle the cascade and mark the puzzle complete."""
    settled = evaluate_cascade(puzzle)
    return settled.model_copy(update={"phase": "complete", "selected_word_index": None})
