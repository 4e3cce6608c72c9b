"""Cascade evaluator: the bonus word is a read-only projection of the columns."""

from typing import List, Optional

from .models import CascadeStatus, Puzzle


def cascade_letters(puzzle: Puzzle) -> List[Optional[str]]:
    """Letters currently visible at the cascade row, None where still hidden."""
    letters: List[Optional[str]] = []
    for position in puzzle.cascade_word.positions:
        word = puzzle.words[position.col]
        letters.append(word.word[position.row] if word.revealed[position.row] else None)
    return letters


def cascade_earned(puzzle: Puzzle) -> bool:
    """All five column words correct, which is necessary and sufficient."""
    return all(w.correct for w in puzzle.words)


def cascade_status(puzzle: Puzzle) -> CascadeStatus:
    """
    Read-only status for display.

    Reports ``"locked"`` as soon as any graded word is incorrect, even though
    the stored flags are only written when the puzzle completes.
    """
    if puzzle.cascade_awarded:
        return "awarded"
    if puzzle.cascade_locked or any(w.guessed and not w.correct for w in puzzle.words):
        return "locked"
    return "pending"


def evaluate_cascade(puzzle: Puzzle) -> Puzzle:
    """
    Settle the cascade outcome once every word has been graded.

    Sets exactly one of ``cascade_awarded`` / ``cascade_locked`` and adds the
    flat bonus when awarded.
    """
    if not all(w.guessed for w in puzzle.words):
        raise ValueError("cascade can only be evaluated after every word is graded")
    awarded = cascade_earned(puzzle)
    score = puzzle.score
    if awarded:
        score += puzzle.config.scoring.cascade_flat_bonus
    return puzzle.model_copy(update={
        "cascade_awarded": awarded,
        "cascade_locked": not awarded,
        "score": score,
    })
