from typing import Dict, List, Tuple

from ..engine.models import Puzzle, PuzzleWord

HIDDEN = '_'
EMPTY = '.'


def cell_letter(word: PuzzleWord, row: int, show_answers: bool = False) -> str:
    """Character shown for one cell: the letter, typed input in lowercase, or a blank."""
    if word.revealed[row] or show_answers:
        return word.word[row]
    typed = word.user_input[row]
    return typed.lower() if typed else HIDDEN


def board_cells(puzzle: Puzzle, show_answers: bool = False) -> Dict[Tuple[int, int], str]:
    """Map of (column, row) to displayed character for every occupied cell."""
    grid = {}
    for x, word in enumerate(puzzle.words):
        for y in range(len(word.word)):
            grid[(x, y)] = cell_letter(word, y, show_answers)
    return grid


def render_board(puzzle: Puzzle, show_answers: bool = False) -> str:
    """
    Render the puzzle as a text grid, one column word per column.

    Hidden letters show as '_', typed but ungraded letters in lowercase and
    cells below a short column as '.'. The cascade row is marked with '>'.

    Example (key word BRAIN, cascade on row 2):

          B R A I N
          _ _ _ _ _
        > _ _ _ _ _
          _ _ _ _ _
          . _ _ _ _
          . . . . _
    """
    grid = board_cells(puzzle, show_answers)

    max_x = max(pos[0] for pos in grid)
    max_y = max(pos[1] for pos in grid)
    cascade_row = puzzle.cascade_word.row

    lines: List[str] = []
    for y in range(max_y + 1):
        marker = '>' if y == cascade_row else ' '
        row = ' '.join(grid.get((x, y), EMPTY) for x in range(max_x + 1))
        lines.append(f"{marker} {row}")

    return '\n'.join(lines)


def render_status(puzzle: Puzzle) -> str:
    """One-line summary of phase, score and remaining resources."""
    guessed = ' '.join(puzzle.guessed_letters) or '-'
    return (
        f"Phase: {puzzle.phase} | Score: {puzzle.score} | "
        f"Guessed: {guessed} | Letters left: {puzzle.letters_remaining} | "
        f"Vowels left: {puzzle.vowels_remaining} | Hints left: {puzzle.hints_remaining}"
    )
