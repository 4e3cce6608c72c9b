"""
Word guess engine.

Handles the word phase: selecting a column, typing into its blanks, spending
hints, and grading words either one at a time or all together on submit.
"""

from typing import Iterable, List, Sequence, Union

from .errors import HintExhausted, InvalidAction
from .models import Puzzle, PuzzleWord
from .phases import complete, require_phase
from .scoring import apply_delta, column_hint_ordinals, grade_delta


def _check_index(puzzle: Puzzle, index: int) -> PuzzleWord:
    if not isinstance(index, int) or not 0 <= index < len(puzzle.words):
        raise InvalidAction(f"Word index must be between 0 and {len(puzzle.words) - 1}, got {index!r}")
    return puzzle.words[index]


def _normalize_input(word: PuzzleWord, new_input: Union[str, Sequence[str]]) -> tuple:
    letters = list(new_input)
    if len(letters) != len(word.word):
        raise InvalidAction(f"Input for a {len(word.word)}-letter word must have {len(word.word)} entries, got {len(letters)}")
    normalized = []
    for entry in letters:
        entry = (entry or "").strip().upper()
        if entry and (len(entry) != 1 or not entry.isalpha()):
            raise InvalidAction(f"Input entries must be a single letter or empty, got {entry!r}")
        normalized.append(entry)
    return tuple(normalized)


def select_word(puzzle: Puzzle, index: int) -> Puzzle:
    """Select the column the player is typing into. No score effect."""
    require_phase(puzzle, "guessing-words", "select_word")
    word = _check_index(puzzle, index)
    if word.guessed:
        raise InvalidAction(f"Word {index + 1} has already been graded")
    if puzzle.selected_word_index == index:
        return puzzle
    return puzzle.model_copy(update={"selected_word_index": index})


def update_word_input(puzzle: Puzzle, word_index: int, new_input: Union[str, Sequence[str]]) -> Puzzle:
    """
    Replace the typed letters of one word.

    Only entries at unrevealed positions matter when grading; entries at
    revealed positions are kept but ignored. Applying the same input twice
    yields the same state.

    Args:
        puzzle: Current puzzle
        word_index: Column being edited
        new_input: One entry per letter position ("" for empty)

    Returns:
        The updated puzzle
    """
    require_phase(puzzle, "guessing-words", "update_word_input")
    word = _check_index(puzzle, word_index)
    if word.guessed:
        raise InvalidAction(f"Word {word_index + 1} has already been graded")
    user_input = _normalize_input(word, new_input)
    if user_input == word.user_input:
        return puzzle
    words = puzzle.replace_word(word_index, word.model_copy(update={"user_input": user_input}))
    return puzzle.model_copy(update={"words": words})


def reveal_hint(puzzle: Puzzle, word_index: int, letter_index: int) -> Puzzle:
    """
    Spend a hint to reveal one hidden letter.

    ``blanks_at_word_phase`` stays frozen; the hint costs multiplier at
    grading time instead. The recorded ordinal is the hint's place in the
    game; under the "column" scope grading renumbers it by column.

    Raises:
        PhaseMismatch: Outside the word phase
        HintExhausted: No hints left or the position is already revealed
        InvalidAction: Bad indices, or the word was already graded
    """
    require_phase(puzzle, "guessing-words", "reveal_hint")
    word = _check_index(puzzle, word_index)
    if not isinstance(letter_index, int) or not 0 <= letter_index < len(word.word):
        raise InvalidAction(f"Letter index must be between 0 and {len(word.word) - 1}, got {letter_index!r}")
    if word.guessed:
        raise InvalidAction(f"Word {word_index + 1} has already been graded")
    if puzzle.hints_remaining <= 0:
        raise HintExhausted("No hints remaining")
    if word.revealed[letter_index]:
        raise HintExhausted(f"Letter {letter_index + 1} of word {word_index + 1} is already revealed")

    ordinal = puzzle.config.max_hints - puzzle.hints_remaining
    revealed = tuple(True if i == letter_index else r for i, r in enumerate(word.revealed))
    user_input = tuple(
        word.word[i] if i == letter_index else typed for i, typed in enumerate(word.user_input)
    )
    hinted = word.model_copy(update={
        "revealed": revealed,
        "user_input": user_input,
        "hints_used": word.hints_used + 1,
        "hint_ordinals": word.hint_ordinals + (ordinal,),
    })
    return puzzle.model_copy(update={
        "words": puzzle.replace_word(word_index, hinted),
        "hints_remaining": puzzle.hints_remaining - 1,
    })


def grade_word(word: PuzzleWord) -> PuzzleWord:
    """Mark a word graded; correct words become fully revealed."""
    correct = word.auto_completed or word.assembled_guess() == word.word
    update = {"guessed": True, "correct": correct}
    if correct:
        update["revealed"] = (True,) * len(word.word)
    return word.model_copy(update=update)


def _grade_batch(puzzle: Puzzle, indices: Iterable[int]) -> Puzzle:
    indices = tuple(indices)
    words: List[PuzzleWord] = list(puzzle.words)
    delta = 0
    for i in indices:
        if puzzle.config.scoring.hint_penalty_scope == "column":
            words[i] = words[i].model_copy(update={"hint_ordinals": column_hint_ordinals(words, i)})
        words[i] = grade_word(words[i])
        delta += grade_delta(words[i], i, puzzle.config.scoring)

    graded = puzzle.model_copy(update={
        "words": tuple(words),
        "score": apply_delta(puzzle.score, delta, puzzle.config.scoring),
        "grading_batches": puzzle.grading_batches + (indices,),
        "selected_word_index": None,
    })
    if all(w.guessed for w in graded.words):
        graded = complete(graded)
    return graded


def guess_word(puzzle: Puzzle, word_index: int, guess: str) -> Puzzle:
    """
    Grade a single word against a typed full-word guess.

    The guess must agree with the letters already revealed. Grading the last
    ungraded word completes the puzzle.
    """
    require_phase(puzzle, "guessing-words", "guess_word")
    word = _check_index(puzzle, word_index)
    if word.guessed:
        raise InvalidAction(f"Word {word_index + 1} has already been graded")
    guess = (guess or "").strip().upper()
    if len(guess) != len(word.word) or not guess.isalpha():
        raise InvalidAction(f"Guess for word {word_index + 1} must be {len(word.word)} letters, got {guess!r}")
    for i, (ch, r) in enumerate(zip(word.word, word.revealed)):
        if r and guess[i] != ch:
            raise InvalidAction(f"Guess '{guess}' contradicts revealed letter '{ch}' at position {i + 1}")

    user_input = tuple("" if r else g for g, r in zip(guess, word.revealed))
    typed = word.model_copy(update={"user_input": user_input})
    return _grade_batch(puzzle.model_copy(update={"words": puzzle.replace_word(word_index, typed)}), (word_index,))


def submit_all_words(puzzle: Puzzle) -> Puzzle:
    """
    Grade every word not yet graded, settle the cascade and complete the puzzle.

    Correct words add their word score; incorrect ones subtract the flat
    wrong-guess penalty.
    """
    require_phase(puzzle, "guessing-words", "submit")
    pending = [i for i, w in enumerate(puzzle.words) if not w.guessed]
    return _grade_batch(puzzle, pending)
