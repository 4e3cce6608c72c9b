"""
Scoring and rule configuration for the puzzle engine.

Every tunable number lives here so the balance harness can override values
without touching engine internals. A GameConfig travels with each Puzzle,
which keeps the score re-derivable from the puzzle alone.
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


# "column": a word's hints are numbered after every hint on the columns to its left
# "game": in the order they were taken; "word": from 0 on every word
HintPenaltyScope = Literal["column", "game", "word"]


class ScoringConfig(BaseModel):
    """Point values and multipliers used by the score calculator."""

    model_config = ConfigDict(frozen=True)

    base_scores: List[int] = Field(default_factory=lambda: [100, 150, 150, 150, 200])
    streak_bonuses: List[int] = Field(default_factory=lambda: [0, 10, 20, 35, 50, 60, 70])
    blank_multiplier: float = Field(default=0.4, ge=0)
    max_blank_multiplier: float = Field(default=2.5, ge=1)
    auto_complete_multiplier: float = Field(default=2.0, ge=0)
    auto_complete_bonus: int = 50
    wrong_guess_penalty: int = Field(default=25, ge=0)
    hint_penalties: List[float] = Field(default_factory=lambda: [0.0, 0.35, 0.5])
    hint_penalty_scope: HintPenaltyScope = "column"
    min_multiplier: float = Field(default=0.1, ge=0)
    cascade_flat_bonus: int = 500
    clamp_score_at_zero: bool = True

    @field_validator("base_scores")
    @classmethod
    def _five_columns(cls, value: List[int]) -> List[int]:
        if len(value) != 5:
            raise ValueError(f"base_scores needs one entry per column (5), got {len(value)}")
        return value

    @field_validator("streak_bonuses", "hint_penalties")
    @classmethod
    def _non_empty(cls, value: List[Any]) -> List[Any]:
        if not value:
            raise ValueError("table must have at least one entry")
        return value


class GameConfig(BaseModel):
    """Letter-phase limits, hint budget and the scoring table."""

    model_config = ConfigDict(frozen=True)

    max_letter_guesses: int = Field(default=7, ge=1, le=26)
    max_vowels: int = Field(default=3, ge=0, le=5)
    min_letters_before_skip: int = Field(default=4, ge=0)
    max_hints: int = Field(default=3, ge=0)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    def with_overrides(self, overrides: Optional[Dict[str, Any]] = None) -> "GameConfig":
        """
        Return a copy with a partial mapping merged over this config.

        Keys of the nested ``scoring`` mapping are merged field by field, so
        ``{"scoring": {"cascade_flat_bonus": 250}}`` keeps every other value.

        Args:
            overrides: Partial config mapping (may be None or empty)

        Returns:
            A validated GameConfig
        """
        if not overrides:
            return self
        data = self.model_dump()
        scoring_overrides = overrides.get("scoring") or {}
        for key, value in overrides.items():
            if key != "scoring":
                data[key] = value
        data["scoring"].update(scoring_overrides)
        return GameConfig.model_validate(data)
