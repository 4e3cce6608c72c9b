"""
Conversion of curated content into a playable Puzzle.

An inconsistent puzzle must never exist, so conversion fails fast with
InvalidContent listing every problem found.
"""

import string
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..engine.config import GameConfig
from ..engine.errors import InvalidContent
from ..engine.models import COLUMN_LENGTHS, NUM_COLUMNS, CascadeConfig, Puzzle, PuzzleWord
from .models import PuzzleContent


def _is_letters(word: str) -> bool:
    """Non-empty and A-Z only; accented letters are rejected."""
    return bool(word) and all(ch in string.ascii_uppercase for ch in word)


def parse_content(data: Mapping[str, Any]) -> PuzzleContent:
    """
    Validate raw content data (camelCase or snake_case keys).

    Raises:
        InvalidContent: With one ``field: problem`` entry per schema error
    """
    try:
        return PuzzleContent.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'content'}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidContent(errors) from e


def validate_content(content: PuzzleContent) -> List[str]:
    """
    Check the seed/cascade/column consistency rules.

    Returns:
        Human-readable problems; empty when the content is consistent
    """
    errors: List[str] = []

    if len(content.seed_word) != 5 or not _is_letters(content.seed_word):
        errors.append(f"Seed word must be exactly 5 letters, got '{content.seed_word}'")
    if len(content.cascade_word) != 5 or not _is_letters(content.cascade_word):
        errors.append(f"Cascade word must be exactly 5 letters, got '{content.cascade_word}'")
    if len(content.column_words) != NUM_COLUMNS:
        errors.append(f"Expected {NUM_COLUMNS} column words, got {len(content.column_words)}")
        return errors

    row = content.cascade_row
    if not 1 <= row <= 3:
        errors.append(f"Cascade row must be between 1 and 3, got {row}")
        return errors

    for col, (word, expected_length) in enumerate(zip(content.column_words, COLUMN_LENGTHS)):
        if not _is_letters(word):
            errors.append(f"Column {col + 1} word '{word}' must contain the letters A-Z only")
            continue
        if len(word) != expected_length:
            errors.append(f"Column {col + 1} word must be {expected_length} letters, got {len(word)}")
            continue
        if col < len(content.seed_word) and word[0] != content.seed_word[col]:
            errors.append(f"Column {col + 1} word '{word}' must start with '{content.seed_word[col]}'")
        if col < len(content.cascade_word) and word[row] != content.cascade_word[col]:
            errors.append(
                f"Column {col + 1} word '{word}' must have '{content.cascade_word[col]}' "
                f"at row {row} for cascade word '{content.cascade_word}'"
            )

    return errors


def content_to_puzzle(
    content: Union[PuzzleContent, Mapping[str, Any]],
    config: Optional[GameConfig] = None,
) -> Puzzle:
    """
    Build a fresh Puzzle from curated content.

    Args:
        content: Curated puzzle, or its raw data
        config: Rules to play with (defaults to the standard rules)

    Returns:
        A Puzzle in the letter phase with only key letters revealed

    Raises:
        InvalidContent: If the content fails validation
    """
    if not isinstance(content, PuzzleContent):
        content = parse_content(content)
    errors = validate_content(content)
    if errors:
        raise InvalidContent(errors)

    config = config or GameConfig()
    return Puzzle(
        key_word=content.seed_word,
        words=tuple(PuzzleWord.create(w) for w in content.column_words),
        cascade_word=CascadeConfig.horizontal(content.cascade_word, content.cascade_row),
        hints_remaining=config.max_hints,
        config=config,
    )
