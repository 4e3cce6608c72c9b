import pytest

from cascade.content import PuzzleContent, content_to_puzzle
from cascade.engine import GameConfig, Puzzle, guess_letter, skip_to_words, update_word_input


# Columns: PEAR, LEMON, AMBER, NORTH, TRAVEL; row 2 spells AMBRA
PLANT_CONTENT = {
    "seedWord": "plant",
    "cascadeWord": "ambra",
    "cascadeRow": 2,
    "columnWords": ["pear", "lemon", "amber", "north", "travel"],
}

# Letters that appear in none of the columns past the key letter
MISSES = ["S", "K", "J", "W", "Y", "Z"]


def make_puzzle(config: GameConfig = None) -> Puzzle:
    return content_to_puzzle(PuzzleContent.model_validate(PLANT_CONTENT), config)


def guess_all(puzzle: Puzzle, letters) -> Puzzle:
    for letter in letters:
        puzzle = guess_letter(puzzle, letter)
    return puzzle


def type_answer(puzzle: Puzzle, index: int, answer: str = None) -> Puzzle:
    """Type ``answer`` (default: the real word) into the blanks of one column."""
    word = puzzle.words[index]
    answer = (answer or word.word).upper()
    letters = ["" if r else ch for ch, r in zip(answer, word.revealed)]
    return update_word_input(puzzle, index, letters)


def type_all_answers(puzzle: Puzzle) -> Puzzle:
    for i, word in enumerate(puzzle.words):
        if not word.guessed:
            puzzle = type_answer(puzzle, i)
    return puzzle


@pytest.fixture
def puzzle() -> Puzzle:
    """Fresh PLANT puzzle with default rules."""
    return make_puzzle()


@pytest.fixture
def word_phase(puzzle) -> Puzzle:
    """PLANT puzzle after guessing E and three misses, then skipping."""
    return skip_to_words(guess_all(puzzle, ["E", "S", "K", "J"]))
