"""
Phase state machine as a pure reducer.

Each player interaction is one Action; ``reduce(puzzle, action)`` returns the
next Puzzle. Given the same starting puzzle and the same action sequence the
final score is always identical.
"""

from typing import Annotated, Iterable, List, Literal, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .letters import guess_letter
from .models import Puzzle
from .phases import skip_to_words
from .words import guess_word, reveal_hint, select_word, submit_all_words, update_word_input


class GuessLetter(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["guess_letter"] = "guess_letter"
    letter: str


class SkipToWords(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["skip"] = "skip"


class SelectWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["select_word"] = "select_word"
    index: int


class UpdateWordInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["update_input"] = "update_input"
    index: int
    letters: Tuple[str, ...]


class UseHint(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["use_hint"] = "use_hint"
    word_index: int
    letter_index: int


class GuessWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["guess_word"] = "guess_word"
    index: int
    guess: str


class SubmitWords(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["submit"] = "submit"


Action = Annotated[
    Union[GuessLetter, SkipToWords, SelectWord, UpdateWordInput, UseHint, GuessWord, SubmitWords],
    Field(discriminator="type"),
]

ACTION_ADAPTER = TypeAdapter(Action)
ACTION_LIST_ADAPTER = TypeAdapter(List[Action])


def parse_action(data) -> BaseModel:
    """Build an Action from a dict such as ``{"type": "guess_letter", "letter": "E"}``."""
    return ACTION_ADAPTER.validate_python(data)


def reduce(puzzle: Puzzle, action: BaseModel) -> Puzzle:
    """
    Apply one action to a puzzle.

    Args:
        puzzle: Current puzzle value (left untouched)
        action: One of the Action variants

    Returns:
        The next puzzle value

    Raises:
        CascadeError: When the action's preconditions do not hold
    """
    if isinstance(action, GuessLetter):
        return guess_letter(puzzle, action.letter)
    if isinstance(action, SkipToWords):
        return skip_to_words(puzzle)
    if isinstance(action, SelectWord):
        return select_word(puzzle, action.index)
    if isinstance(action, UpdateWordInput):
        return update_word_input(puzzle, action.index, action.letters)
    if isinstance(action, UseHint):
        return reveal_hint(puzzle, action.word_index, action.letter_index)
    if isinstance(action, GuessWord):
        return guess_word(puzzle, action.index, action.guess)
    if isinstance(action, SubmitWords):
        return submit_all_words(puzzle)
    raise TypeError(f"Unknown action: {action!r}")


def replay(puzzle: Puzzle, actions: Iterable[BaseModel]) -> Puzzle:
    """Fold a sequence of actions over a starting puzzle."""
    for action in actions:
        puzzle = reduce(puzzle, action)
    return puzzle
