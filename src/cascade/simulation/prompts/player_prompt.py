from typing import List, Optional

from ...engine.models import Puzzle
from ...engine.scoring import current_streak
from ...utils.board import render_board


def format_columns(puzzle: Puzzle) -> List[str]:
    """One line per column: number, visible pattern and status."""
    lines = []
    for i, word in enumerate(puzzle.words):
        pattern = " ".join(ch if ch else "_" for ch in word.visible_letters())
        if word.guessed:
            status = "correct" if word.correct else "incorrect"
        elif word.auto_completed:
            status = "auto-completed"
        else:
            status = f"{word.blanks} blanks"
        lines.append(f"{i + 1}. {pattern} ({len(word.word)} letters, {status})")
    return lines


def format_feedback(
    last_letter: Optional[str] = None,
    last_hits: Optional[int] = None,
    action_error: Optional[str] = None,
) -> str:
    """Format feedback from the previous turn."""
    lines = []

    if action_error:
        lines.append(f"Action failed: {action_error}")

    if last_letter is not None and last_hits is not None:
        if last_hits:
            lines.append(f"{last_letter} was a hit in {last_hits} column(s)")
        else:
            lines.append(f"{last_letter} was a miss")

    return "\n".join(lines)


def build_player_prompt(
    puzzle: Puzzle,
    turn_number: int,
    last_hits: Optional[int] = None,
    action_error: Optional[str] = None,
) -> str:
    """
    Build the player prompt with current puzzle state and feedback.

    Args:
        puzzle: Current puzzle
        turn_number: Current turn number
        last_hits: Columns hit by the previous letter guess
        action_error: Error from last action attempt

    Returns:
        Formatted prompt string
    """
    lines = []

    lines.append(f"## Turn {turn_number}")
    lines.append("")

    last_letter = puzzle.guessed_letters[-1] if puzzle.guessed_letters else None
    feedback = format_feedback(last_letter, last_hits, action_error)
    if feedback:
        lines.append("### Feedback from last turn")
        lines.append(feedback)
        lines.append("")

    lines.append("### Board")
    lines.append("```")
    lines.append(render_board(puzzle))
    lines.append("```")
    lines.append("")
    lines.extend(format_columns(puzzle))
    lines.append("")

    lines.append("### Game State")
    lines.append(f"- Phase: {puzzle.phase}")
    lines.append(f"- Score: {puzzle.score}")
    lines.append(f"- Guessed letters: {' '.join(puzzle.guessed_letters) or 'none'}")
    lines.append(f"- Letter guesses left: {puzzle.letters_remaining} (vowels left: {puzzle.vowels_remaining})")
    lines.append(f"- Current streak: {current_streak(puzzle)}")

    if puzzle.phase == "guessing-letters":
        if len(puzzle.guessed_letters) >= puzzle.config.min_letters_before_skip:
            lines.append("- SKIP is available")
        else:
            lines.append(f"- SKIP unlocks after {puzzle.config.min_letters_before_skip} letters")
        lines.append("")
        lines.append("Respond with <game_plan> and <action>.")
    else:
        lines.append("")
        lines.append("Respond with <game_plan> and <words> for every unsolved column.")

    return "\n".join(lines)
