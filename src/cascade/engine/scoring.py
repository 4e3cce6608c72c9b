"""
Score calculator.

Pure arithmetic over already-recorded state. The letter and word engines add
the values computed here to the running score; ``calculate_final_score``
re-derives the same total from the puzzle's history for verification.
"""

import math
from typing import List, Optional, Sequence, Tuple

from .config import ScoringConfig
from .models import Puzzle, PuzzleWord, ScoreBreakdownItem


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def streak_bonus(streak: int, config: Optional[ScoringConfig] = None) -> int:
    """
    Bonus added for a hit that brings the streak to ``streak``.

    Streaks longer than the table use its last entry.
    """
    config = config or ScoringConfig()
    if streak <= 0:
        return 0
    table = config.streak_bonuses
    return table[min(streak, len(table) - 1)]


def is_hit(words, letter: str) -> bool:
    """A guess hits when the letter appears in any word past the key letter."""
    letter = letter.upper()
    return any(letter in w.word[1:] for w in words)


def letter_outcomes(puzzle: Puzzle) -> List[bool]:
    """Hit/miss history of the guessed letters, in guess order."""
    return [is_hit(puzzle.words, letter) for letter in puzzle.guessed_letters]


def streak_bonuses_earned(puzzle: Puzzle) -> List[int]:
    """Bonus earned by each guessed letter, in guess order."""
    bonuses = []
    streak = 0
    for hit in letter_outcomes(puzzle):
        streak = streak + 1 if hit else 0
        bonuses.append(streak_bonus(streak, puzzle.config.scoring))
    return bonuses


def streak_bonus_total(puzzle: Puzzle) -> int:
    return sum(streak_bonuses_earned(puzzle))


def current_streak(puzzle: Puzzle) -> int:
    """Length of the run of hits ending at the most recent guess."""
    streak = 0
    for hit in letter_outcomes(puzzle):
        streak = streak + 1 if hit else 0
    return streak


def hint_penalty(ordinal: int, config: Optional[ScoringConfig] = None) -> float:
    """Multiplier deduction for the hint with the given 0-based ordinal."""
    config = config or ScoringConfig()
    if ordinal < 0:
        return 0.0
    table = config.hint_penalties
    return table[min(ordinal, len(table) - 1)]


def column_hint_ordinals(words: Sequence[PuzzleWord], column_index: int) -> Tuple[int, ...]:
    """Ordinals of one column's hints when hints are counted left to right."""
    before = sum(w.hints_used for w in words[:column_index])
    return tuple(range(before, before + words[column_index].hints_used))


def hint_deduction(word: PuzzleWord, config: Optional[ScoringConfig] = None) -> float:
    """
    Total multiplier deduction for the hints taken on one word.

    Uses the ordinals recorded on the word, which grading rewrites to column
    order under the "column" scope.
    """
    config = config or ScoringConfig()
    if config.hint_penalty_scope == "word":
        ordinals = range(word.hints_used)
    else:
        ordinals = word.hint_ordinals
    return sum(hint_penalty(k, config) for k in ordinals)


def is_auto_complete(word: PuzzleWord) -> bool:
    """Fully revealed during the letter phase, or no blanks left at the transition."""
    return word.auto_completed or word.blanks_at_word_phase == 0


def word_multiplier(word: PuzzleWord, config: Optional[ScoringConfig] = None) -> float:
    """
    Effective multiplier for a manually guessed word.

    ``min(1 + blank_multiplier x blanks, cap)`` minus the hint deduction,
    floored at ``min_multiplier``.
    """
    config = config or ScoringConfig()
    raw = 1 + config.blank_multiplier * word.blanks_at_word_phase
    capped = min(raw, config.max_blank_multiplier)
    return max(config.min_multiplier, capped - hint_deduction(word, config))


def word_score(word: PuzzleWord, column_index: int, config: Optional[ScoringConfig] = None) -> int:
    """
    Points for a correctly guessed word.

    Args:
        word: The graded column word
        column_index: Column of the word (selects the base score)
        config: Scoring table (defaults to the standard one)

    Returns:
        Points awarded for the word
    """
    config = config or ScoringConfig()
    base = config.base_scores[column_index]
    if is_auto_complete(word):
        return round_half_up(base * config.auto_complete_multiplier) + config.auto_complete_bonus
    return round_half_up(base * word_multiplier(word, config))


def grade_delta(word: PuzzleWord, column_index: int, config: Optional[ScoringConfig] = None) -> int:
    """Score change caused by grading a word: its score if correct, the penalty otherwise."""
    config = config or ScoringConfig()
    if word.correct:
        return word_score(word, column_index, config)
    return -config.wrong_guess_penalty


def apply_delta(score: int, delta: int, config: ScoringConfig) -> int:
    """Add a grading delta, clamping at zero when configured."""
    total = score + delta
    if config.clamp_score_at_zero:
        total = max(0, total)
    return total


def calculate_final_score(puzzle: Puzzle) -> int:
    """
    Recompute the total from the puzzle's history.

    Sums streak bonuses from the guessed letters, replays each grading batch
    (clamping after each batch when configured), then adds the cascade bonus.
    Equals ``puzzle.score`` for every reachable puzzle.
    """
    config = puzzle.config.scoring
    total = streak_bonus_total(puzzle)
    for batch in puzzle.grading_batches:
        delta = sum(grade_delta(puzzle.words[i], i, config) for i in batch)
        total = apply_delta(total, delta, config)
    if puzzle.cascade_awarded:
        total += config.cascade_flat_bonus
    return total


def _word_detail(word: PuzzleWord, column_index: int, config: ScoringConfig) -> str:
    base = config.base_scores[column_index]
    if is_auto_complete(word):
        return f"{base} × {config.auto_complete_multiplier} + {config.auto_complete_bonus} auto bonus"
    detail = f"{base} × {word_multiplier(word, config):.2f}"
    if word.hints_used:
        detail += f" ({word.hints_used} hint{'s' if word.hints_used > 1 else ''})"
    return detail


def get_score_breakdown(puzzle: Puzzle) -> List[ScoreBreakdownItem]:
    """
    Presentation rows for the score: streak, one row per word, cascade.

    Derived from already-graded state; not a scoring authority.
    """
    config = puzzle.config.scoring
    breakdown: List[ScoreBreakdownItem] = []

    streak_points = streak_bonus_total(puzzle)
    if streak_points > 0:
        breakdown.append(ScoreBreakdownItem(
            label="Letter Streak Bonus",
            points=streak_points,
            detail="Consecutive letter hits",
        ))

    for index, word in enumerate(puzzle.words):
        label = f"Word {index + 1}"
        if word.guessed and word.correct:
            if is_auto_complete(word):
                label += " (auto)"
            breakdown.append(ScoreBreakdownItem(
                label=f"{label}: {word.word}",
                points=word_score(word, index, config),
                detail=_word_detail(word, index, config),
            ))
        elif word.guessed:
            breakdown.append(ScoreBreakdownItem(
                label=f"{label}: {word.word}",
                points=-config.wrong_guess_penalty,
                detail=f"Incorrect (-{config.wrong_guess_penalty})",
            ))
        else:
            breakdown.append(ScoreBreakdownItem(label=label, points=0, detail="Not graded"))

    cascade = puzzle.cascade_word.word
    if puzzle.cascade_awarded:
        breakdown.append(ScoreBreakdownItem(
            label=f"Cascade Bonus: {cascade}",
            points=config.cascade_flat_bonus,
            detail="Cascade word complete!",
        ))
    elif puzzle.cascade_locked:
        breakdown.append(ScoreBreakdownItem(
            label=f"Cascade: {cascade}",
            points=0,
            detail="Incorrect guess - no bonus",
        ))
    else:
        breakdown.append(ScoreBreakdownItem(label="Cascade", points=0, detail="Pending"))

    return breakdown
