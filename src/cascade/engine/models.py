"""
Pydantic models for the puzzle engine.

A Puzzle is an immutable value: every engine operation returns a new Puzzle
built with ``model_copy(update=...)`` and never mutates its input.
"""

from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import GameConfig


Phase = Literal["guessing-letters", "guessing-words", "complete"]
CascadeStatus = Literal["pending", "awarded", "locked"]

PHASE_ORDER: Tuple[Phase, ...] = ("guessing-letters", "guessing-words", "complete")

# Column word lengths, left to right
COLUMN_LENGTHS: Tuple[int, ...] = (4, 5, 5, 5, 6)
NUM_COLUMNS = len(COLUMN_LENGTHS)
CASCADE_ROWS: Tuple[int, ...] = (1, 2, 3)

VOWELS = frozenset("AEIOU")


def is_vowel(letter: str) -> bool:
    """Check whether a single letter is a vowel (case-insensitive)."""
    return letter.upper() in VOWELS


class PuzzleWord(BaseModel):
    """One column word and the player's progress on it."""

    model_config = ConfigDict(frozen=True)

    word: str = Field(..., pattern=r"^[A-Z]+$")
    revealed: Tuple[bool, ...]
    user_input: Tuple[str, ...]
    guessed: bool = False
    correct: bool = False
    auto_completed: bool = False
    hints_used: int = Field(default=0, ge=0)
    hint_ordinals: Tuple[int, ...] = ()
    blanks_at_word_phase: int = Field(default=0, ge=0)

    @classmethod
    def create(cls, word: str) -> "PuzzleWord":
        """Build a fresh column word with only the key letter revealed."""
        word = word.upper()
        revealed = tuple(i == 0 for i in range(len(word)))
        return cls(word=word, revealed=revealed, user_input=("",) * len(word))

    @model_validator(mode="after")
    def _check_shape(self) -> "PuzzleWord":
        if len(self.revealed) != len(self.word) or len(self.user_input) != len(self.word):
            raise ValueError(f"revealed/user_input must match the length of '{self.word}'")
        if not self.revealed[0]:
            raise ValueError(f"key letter of '{self.word}' must stay revealed")
        if self.hints_used > len(self.word) - 1:
            raise ValueError(f"'{self.word}' cannot have {self.hints_used} hints")
        if len(self.hint_ordinals) != self.hints_used:
            raise ValueError("hint_ordinals must record one entry per hint used")
        return self

    @property
    def blanks(self) -> int:
        """Number of positions not yet revealed."""
        return sum(1 for r in self.revealed if not r)

    @property
    def fully_revealed(self) -> bool:
        return all(self.revealed)

    def unrevealed_positions(self) -> List[int]:
        """Indices of the positions still hidden."""
        return [i for i, r in enumerate(self.revealed) if not r]

    def visible_letters(self) -> List[Optional[str]]:
        """Letters as currently shown: the answer where revealed, None elsewhere."""
        return [ch if r else None for ch, r in zip(self.word, self.revealed)]

    def assembled_guess(self) -> str:
        """Revealed letters overlaid with the player's typed input."""
        return "".join(
            ch if r else (typed or "").upper()
            for ch, r, typed in zip(self.word, self.revealed, self.user_input)
        )


class CascadePosition(BaseModel):
    """A single (column, row) cell occupied by the cascade word."""

    model_config = ConfigDict(frozen=True)

    col: int = Field(..., ge=0, lt=NUM_COLUMNS)
    row: int = Field(..., ge=1, le=3)


class CascadeConfig(BaseModel):
    """The hidden bonus word running across one shared row."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=1, le=3)
    word: str = Field(..., pattern=r"^[A-Z]{5}$")
    positions: Tuple[CascadePosition, ...]

    @classmethod
    def horizontal(cls, word: str, row: int) -> "CascadeConfig":
        """Build a cascade word occupying ``row`` in every column."""
        positions = tuple(CascadePosition(col=col, row=row) for col in range(NUM_COLUMNS))
        return cls(row=row, word=word.upper(), positions=positions)

    @model_validator(mode="after")
    def _one_position_per_column(self) -> "CascadeConfig":
        if len(self.positions) != NUM_COLUMNS:
            raise ValueError(f"cascade word needs {NUM_COLUMNS} positions, got {len(self.positions)}")
        if sorted(p.col for p in self.positions) != list(range(NUM_COLUMNS)):
            raise ValueError("cascade positions must cover each column exactly once")
        if any(p.row != self.row for p in self.positions):
            raise ValueError(f"every cascade position must sit on row {self.row}")
        return self


class Puzzle(BaseModel):
    """
    Complete state of one game.

    Attributes:
        key_word: Five letters; key_word[c] is the first letter of column c
        words: The five column words
        guessed_letters: Guessed letters in guess order
        guessed_vowels: Number of vowels among guessed_letters
        phase: Current phase of the game
        score: Running total, authoritative
        selected_word_index: Column selected for typing (word phase only)
        cascade_word: The bonus word and the cells it occupies
        cascade_locked: Bonus lost (set at completion)
        cascade_awarded: Bonus earned (set at completion)
        hints_remaining: Hints left to spend in the word phase
        grading_batches: Column indices graded together, in grading order
        config: Rules and scoring table this game is played with
    """

    model_config = ConfigDict(frozen=True)

    key_word: str = Field(..., pattern=r"^[A-Z]{5}$")
    words: Tuple[PuzzleWord, ...]
    guessed_letters: Tuple[str, ...] = ()
    guessed_vowels: int = Field(default=0, ge=0)
    phase: Phase = "guessing-letters"
    score: int = 0
    selected_word_index: Optional[int] = None
    cascade_word: CascadeConfig
    cascade_locked: bool = False
    cascade_awarded: bool = False
    hints_remaining: int = Field(default=3, ge=0)
    grading_batches: Tuple[Tuple[int, ...], ...] = ()
    config: GameConfig = Field(default_factory=GameConfig)

    @model_validator(mode="after")
    def _check_invariants(self) -> "Puzzle":
        lengths = tuple(len(w.word) for w in self.words)
        if lengths != COLUMN_LENGTHS:
            raise ValueError(f"column lengths must be {list(COLUMN_LENGTHS)}, got {list(lengths)}")
        if len(self.guessed_letters) > self.config.max_letter_guesses:
            raise ValueError("more letters guessed than the guess limit allows")
        if len(set(self.guessed_letters)) != len(self.guessed_letters):
            raise ValueError("guessed letters must be unique")
        if self.guessed_vowels > self.config.max_vowels:
            raise ValueError("more vowels guessed than the vowel limit allows")
        if self.guessed_vowels != sum(1 for letter in self.guessed_letters if is_vowel(letter)):
            raise ValueError("guessed_vowels does not match guessed_letters")
        if self.hints_remaining > self.config.max_hints:
            raise ValueError("hints_remaining exceeds max_hints")
        if self.cascade_locked and self.cascade_awarded:
            raise ValueError("cascade cannot be both locked and awarded")
        if self.phase == "complete":
            all_correct = all(w.correct for w in self.words)
            if self.cascade_awarded != all_correct or self.cascade_locked == self.cascade_awarded:
                raise ValueError("completed puzzle has an inconsistent cascade outcome")
        return self

    @property
    def max_letter_guesses(self) -> int:
        return self.config.max_letter_guesses

    @property
    def max_vowels(self) -> int:
        return self.config.max_vowels

    @property
    def max_hints(self) -> int:
        return self.config.max_hints

    @property
    def letters_remaining(self) -> int:
        """Letter guesses still available."""
        return self.config.max_letter_guesses - len(self.guessed_letters)

    @property
    def vowels_remaining(self) -> int:
        return self.config.max_vowels - self.guessed_vowels

    @property
    def words_correct(self) -> int:
        return sum(1 for w in self.words if w.correct)

    @property
    def is_complete(self) -> bool:
        return self.phase == "complete"

    def replace_word(self, index: int, word: PuzzleWord) -> Tuple[PuzzleWord, ...]:
        """Return the word tuple with one column swapped out."""
        return tuple(word if i == index else w for i, w in enumerate(self.words))


class ScoreBreakdownItem(BaseModel):
    """One presentation row of the score breakdown."""

    label: str
    points: int
    detail: Optional[str] = None
