"""
Pydantic models for the simulation harness.

Configuration comes from YAML (BenchmarkConfig); results are plain models
that serialise straight to JSON.
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


# Type aliases
Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class ChatTurn(BaseModel):
    """One game turn: the board prompt sent and the model's reply."""
    prompt: str
    reply: str


class ParsedReply(BaseModel):
    """Parsed components of an LLM player reply."""
    thinking: Optional[str] = None
    letter: Optional[str] = None  # Letter to guess, if the action was GUESS
    skip: bool = False
    words: Dict[int, str] = Field(default_factory=dict)  # Column index -> guessed word
    raw_response: str = ""


class StrategyConfig(BaseModel):
    """Configuration for one strategy in a benchmark run."""
    model_config = ConfigDict(extra='allow')

    name: str
    model: Optional[str] = None  # Required for the "llm" strategy
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    # Additional kwargs are allowed and passed to LiteLLM


class BenchmarkConfig(BaseModel):
    """Configuration for a simulation run."""
    iterations: int = Field(default=1000, ge=1)
    seed: Optional[int] = None
    verbose_games: int = Field(default=3, ge=0)
    strategies: List[StrategyConfig] = Field(
        default_factory=lambda: [StrategyConfig(name=n) for n in (
            "aggressive", "conservative", "moderate", "vowel-heavy",
            "adaptive", "strategic-skip", "hint-reliant", "random",
        )]
    )
    overrides: Dict[str, Any] = Field(default_factory=dict)  # Partial GameConfig


class GameResult(BaseModel):
    """Result of a single simulated game."""
    total_score: int
    letter_phase_score: int = 0
    word_phase_score: int = 0
    cascade_bonus: int = 0
    letters_guessed: int = 0
    letter_hits: int = 0  # Words hit, summed over guesses
    vowels_used: int = 0
    hints_used: int = 0
    words_correct: int = 0
    words_auto_completed: int = 0
    blanks_at_word_phase: int = 0
    cascade_earned: bool = False
    errors: List[str] = Field(default_factory=list)
    actions: List[Dict[str, Any]] = Field(default_factory=list)
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class ScorePercentiles(BaseModel):
    p10: int = 0
    p25: int = 0
    p50: int = 0
    p75: int = 0
    p90: int = 0


class SimulationResults(BaseModel):
    """Aggregated results of many games with one strategy."""
    strategy_name: str
    iterations: int

    avg_total_score: float = 0.0
    avg_letter_phase_score: float = 0.0
    avg_word_phase_score: float = 0.0
    avg_cascade_bonus: float = 0.0
    avg_letters_guessed: float = 0.0
    avg_letter_hit_rate: float = 0.0  # Words hit per letter guessed
    avg_words_correct: float = 0.0
    avg_words_auto_completed: float = 0.0
    avg_blanks_at_word_phase: float = 0.0
    cascade_earned_rate: float = 0.0

    score_std_dev: float = 0.0
    min_score: int = 0
    max_score: int = 0
    score_percentiles: ScorePercentiles = Field(default_factory=ScorePercentiles)

    all_results: List[GameResult] = Field(default_factory=list)


class StrategyComparison(BaseModel):
    """Comparison report across strategies."""
    strategies: List[SimulationResults] = Field(default_factory=list)
    insights: List[str] = Field(default_factory=list)
    config: Optional[BenchmarkConfig] = None
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
