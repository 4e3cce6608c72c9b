"""Typed precondition failures raised by the puzzle engine."""

from typing import List, Optional


class CascadeError(Exception):
    """Base class for every engine error."""

    code = "CASCADE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PhaseMismatch(CascadeError):
    """Operation invoked outside the phase it belongs to."""

    code = "PHASE_MISMATCH"

    def __init__(self, operation: str, phase: str, expected: str):
        super().__init__(
            f"'{operation}' is only allowed in phase '{expected}' (current phase: '{phase}')"
        )
        self.operation = operation
        self.phase = phase
        self.expected = expected


class GuessLimitExceeded(CascadeError):
    code = "GUESS_LIMIT"


class VowelLimitExceeded(CascadeError):
    code = "VOWEL_LIMIT"


class LetterAlreadyGuessed(CascadeError):
    code = "DUPLICATE_LETTER"


class SkipNotAllowed(CascadeError):
    code = "SKIP_NOT_ALLOWED"


class HintExhausted(CascadeError):
    """No hints remain, or the requested position is already revealed."""

    code = "HINT_EXHAUSTED"


class InvalidAction(CascadeError, ValueError):
    """Malformed action argument (bad letter, index or input length)."""

    code = "INVALID_ACTION"


class InvalidContent(CascadeError, ValueError):
    """Curated puzzle content failed the consistency checks at construction."""

    code = "INVALID_CONTENT"

    def __init__(self, errors: List[str], message: Optional[str] = None):
        super().__init__(message or "Invalid puzzle content: " + "; ".join(errors))
        self.errors = list(errors)
