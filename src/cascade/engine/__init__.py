"""Puzzle game engine: phase state machine and scoring."""

from .config import GameConfig, ScoringConfig
from .errors import (
    CascadeError,
    PhaseMismatch,
    GuessLimitExceeded,
    VowelLimitExceeded,
    LetterAlreadyGuessed,
    SkipNotAllowed,
    HintExhausted,
    InvalidAction,
    InvalidContent,
)
from .models import (
    Phase,
    CascadeStatus,
    COLUMN_LENGTHS,
    NUM_COLUMNS,
    VOWELS,
    is_vowel,
    PuzzleWord,
    CascadePosition,
    CascadeConfig,
    Puzzle,
    ScoreBreakdownItem,
)
from .scoring import (
    word_score,
    word_multiplier,
    streak_bonus,
    is_hit,
    letter_outcomes,
    current_streak,
    streak_bonus_total,
    calculate_final_score,
    get_score_breakdown,
)
from .cascade import cascade_letters, cascade_status, evaluate_cascade
from .phases import can_skip_to_words, skip_to_words
from .letters import guess_letter
from .words import select_word, update_word_input, reveal_hint, guess_word, submit_all_words
from .machine import (
    Action,
    ACTION_ADAPTER,
    ACTION_LIST_ADAPTER,
    GuessLetter,
    SkipToWords,
    SelectWord,
    UpdateWordInput,
    UseHint,
    GuessWord,
    SubmitWords,
    parse_action,
    reduce,
    replay,
)

__all__ = [
    # Config
    "GameConfig",
    "ScoringConfig",
    # Errors
    "CascadeError",
    "PhaseMismatch",
    "GuessLimitExceeded",
    "VowelLimitExceeded",
    "LetterAlreadyGuessed",
    "SkipNotAllowed",
    "HintExhausted",
    "InvalidAction",
    "InvalidContent",
    # Models
    "Phase",
    "CascadeStatus",
    "COLUMN_LENGTHS",
    "NUM_COLUMNS",
    "VOWELS",
    "is_vowel",
    "PuzzleWord",
    "CascadePosition",
    "CascadeConfig",
    "Puzzle",
    "ScoreBreakdownItem",
    # Scoring
    "word_score",
    "word_multiplier",
    "streak_bonus",
    "is_hit",
    "letter_outcomes",
    "current_streak",
    "streak_bonus_total",
    "calculate_final_score",
    "get_score_breakdown",
    # Cascade
    "cascade_letters",
    "cascade_status",
    "evaluate_cascade",
    # Operations
    "can_skip_to_words",
    "skip_to_words",
    "guess_letter",
    "select_word",
    "update_word_input",
    "reveal_hint",
    "guess_word",
    "submit_all_words",
    # Reducer
    "Action",
    "ACTION_ADAPTER",
    "ACTION_LIST_ADAPTER",
    "GuessLetter",
    "SkipToWords",
    "SelectWord",
    "UpdateWordInput",
    "UseHint",
    "GuessWord",
    "SubmitWords",
    "parse_action",
    "reduce",
    "replay",
]
