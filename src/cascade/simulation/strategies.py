"""
Synthetic player strategies for balance simulation.

A strategy decides which letters to guess, when to move on to the word
phase, which hints to spend, and what it types for each word. Word-guess
skill is modelled as a probability of typing the right answer, driven by
how much of the word is visible.
"""

import random
import string
from typing import Callable, Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, PrivateAttr

from ..engine.models import Puzzle, PuzzleWord, is_vowel
from .letter_analysis import (
    consonants_by_expected_value,
    count_letter_hits,
    letters_by_expected_value,
    vowels_by_expected_value,
)


def base_accuracy(word: PuzzleWord) -> float:
    """Chance an average player names a word given how much of it is visible."""
    if word.auto_completed or word.fully_revealed:
        return 1.0
    ratio = (len(word.word) - word.blanks) / len(word.word)
    if ratio >= 0.8:
        return 0.95
    if ratio >= 0.6:
        return 0.75
    if ratio >= 0.4:
        return 0.5
    if ratio >= 0.2:
        return 0.3
    return 0.15


def skilled_accuracy(word: PuzzleWord) -> float:
    """Accuracy curve of a strong-vocabulary player."""
    if word.auto_completed or word.fully_revealed:
        return 1.0
    ratio = (len(word.word) - word.blanks) / len(word.word)
    if ratio >= 0.6:
        return 0.98
    if ratio >= 0.4:
        return 0.90
    if ratio >= 0.2:
        return 0.75
    return 0.50


def last_guess_hits(puzzle: Puzzle) -> int:
    """Columns hit by the most recent letter guess (0 before any guess)."""
    if not puzzle.guessed_letters:
        return 0
    return count_letter_hits(puzzle.guessed_letters[-1], [w.word for w in puzzle.words])


def best_legal_letter(puzzle: Puzzle) -> Optional[str]:
    """Best frequency-ranked letter that is still legal to guess."""
    for letter in letters_by_expected_value():
        if letter in puzzle.guessed_letters:
            continue
        if is_vowel(letter) and puzzle.guessed_vowels >= puzzle.config.max_vowels:
            continue
        return letter
    return None


def wrong_answer(word: PuzzleWord, rng: random.Random) -> str:
    """The answer with its first hidden letter swapped for a different one."""
    hidden = word.unrevealed_positions()
    if not hidden:
        return word.word
    pos = hidden[0]
    letter = rng.choice([c for c in string.ascii_uppercase if c != word.word[pos]])
    return word.word[:pos] + letter + word.word[pos + 1:]


class Strategy(BaseModel):
    """
    Base class for simulated players.

    Subclasses override ``choose_letter`` and ``fill_word``; the simulator
    calls ``new_game`` before each game.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str = ""

    def new_game(self, rng: random.Random) -> None:
        """Reset per-game state."""

    def choose_letter(self, puzzle: Puzzle, rng: random.Random) -> Optional[str]:
        """Letter to guess next, or None to move on to the word phase."""
        raise NotImplementedError

    def hints_for(self, puzzle: Puzzle, rng: random.Random) -> List[Tuple[int, int]]:
        """(word index, letter index) pairs to reveal before typing."""
        return []

    def fill_word(self, puzzle: Puzzle, index: int, rng: random.Random) -> str:
        """Full word typed for one column."""
        raise NotImplementedError

    def consume_usage(self) -> Dict[str, int]:
        """Token usage since the last call (LLM players only)."""
        return {}

    def consume_errors(self) -> List[str]:
        """Recoverable player errors since the last call."""
        return []


class FrequencyStrategy(Strategy):
    """
    Guesses letters by their frequency in the word lists.

    Attributes:
        letters: Number of letters to guess before moving on
        vowels_first: Leading guesses that prefer vowels (while vowels remain)
        then: Letter pool after the vowel stage
        stop_on_miss_after: Move on early when the last guess missed, once
            at least this many letters are guessed
        random_letters: Pick letters uniformly at random instead
        random_target: Draw the number of letters per game between the skip
            minimum and the guess limit
        hints: Hints to spend in the word phase
        accuracy_scale: Multiplier on the word-guess accuracy curve
        skilled: Use the strong-vocabulary accuracy curve
    """

    letters: int = 7
    vowels_first: int = 0
    then: Literal["all", "consonants"] = "all"
    stop_on_miss_after: Optional[int] = None
    random_letters: bool = False
    random_target: bool = False
    hints: int = 0
    accuracy_scale: float = 1.0
    skilled: bool = False

    _target: int = PrivateAttr(default=7)

    def new_game(self, rng: random.Random) -> None:
        self._target = self.letters

    def _pick_target(self, puzzle: Puzzle, rng: random.Random) -> int:
        if self.random_target and not puzzle.guessed_letters:
            low = puzzle.config.min_letters_before_skip
            self._target = rng.randint(low, max(low, puzzle.config.max_letter_guesses))
        return self._target

    def choose_letter(self, puzzle: Puzzle, rng: random.Random) -> Optional[str]:
        guessed = len(puzzle.guessed_letters)
        if guessed >= self._pick_target(puzzle, rng):
            return None
        if (
            self.stop_on_miss_after is not None
            and guessed >= self.stop_on_miss_after
            and last_guess_hits(puzzle) == 0
        ):
            return None

        can_use_vowel = puzzle.guessed_vowels < puzzle.config.max_vowels

        def usable(letter: str) -> bool:
            return letter not in puzzle.guessed_letters and (can_use_vowel or not is_vowel(letter))

        if self.random_letters:
            options = [c for c in string.ascii_uppercase if usable(c)]
            return rng.choice(options) if options else None

        if guessed < self.vowels_first and can_use_vowel:
            for letter in vowels_by_expected_value():
                if usable(letter):
                    return letter

        pool = consonants_by_expected_value() if self.then == "consonants" else letters_by_expected_value()
        for letter in pool:
            if usable(letter):
                return letter
        return None

    def hints_for(self, puzzle: Puzzle, rng: random.Random) -> List[Tuple[int, int]]:
        budget = min(self.hints, puzzle.hints_remaining)
        hidden = {i: w.unrevealed_positions() for i, w in enumerate(puzzle.words) if not w.guessed}
        picks = []
        for _ in range(budget):
            candidates = [i for i, positions in hidden.items() if positions]
            if not candidates:
                break
            # Most blanks first, leftmost column on ties
            index = max(candidates, key=lambda i: (len(hidden[i]), -i))
            picks.append((index, hidden[index].pop(0)))
        return picks

    def word_accuracy(self, word: PuzzleWord) -> float:
        curve = skilled_accuracy if self.skilled else base_accuracy
        return min(1.0, curve(word) * self.accuracy_scale)

    def fill_word(self, puzzle: Puzzle, index: int, rng: random.Random) -> str:
        word = puzzle.words[index]
        if rng.random() < self.word_accuracy(word):
            return word.word
        return wrong_answer(word, rng)


STRATEGIES: Dict[str, Callable[[], Strategy]] = {
    "aggressive": lambda: FrequencyStrategy(
        name="aggressive",
        description="Use every letter guess, highest-frequency letters first",
        letters=7,
        accuracy_scale=1.1,
    ),
    "conservative": lambda: FrequencyStrategy(
        name="conservative",
        description="Only the minimum 4 letters, vowels first, maximise multipliers",
        letters=4,
        vowels_first=3,
        then="consonants",
        accuracy_scale=0.95,
    ),
    "moderate": lambda: FrequencyStrategy(
        name="moderate",
        description="5 letter guesses, vowels first, balanced approach",
        letters=5,
        vowels_first=3,
    ),
    "vowel-heavy": lambda: FrequencyStrategy(
        name="vowel-heavy",
        description="All vowel guesses first, then top consonants",
        letters=6,
        vowels_first=3,
        then="consonants",
        accuracy_scale=1.05,
    ),
    "adaptive": lambda: FrequencyStrategy(
        name="adaptive",
        description="Stop guessing letters once a guess misses (after 5)",
        letters=7,
        vowels_first=3,
        then="consonants",
        stop_on_miss_after=5,
        accuracy_scale=1.05,
    ),
    "strategic-skip": lambda: FrequencyStrategy(
        name="strategic-skip",
        description="Skip at the minimum with a strong vocabulary",
        letters=4,
        vowels_first=3,
        then="consonants",
        skilled=True,
    ),
    "hint-reliant": lambda: FrequencyStrategy(
        name="hint-reliant",
        description="Skip at the minimum and spend every hint",
        letters=4,
        vowels_first=3,
        then="consonants",
        hints=3,
    ),
    "random": lambda: FrequencyStrategy(
        name="random",
        description="Random letters and random stopping (baseline)",
        random_letters=True,
        random_target=True,
        accuracy_scale=0.85,
    ),
}


def get_strategy(name: str) -> Strategy:
    """
    Build a fresh synthetic strategy by name.

    Raises:
        KeyError: If no strategy has that name
    """
    if name not in STRATEGIES:
        raise KeyError(f"Unknown strategy '{name}'. Available: {', '.join(sorted(STRATEGIES))}")
    return STRATEGIES[name]()
