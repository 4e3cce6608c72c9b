"""Balance simulation: synthetic and LLM players driving the real engine."""

from .models import (
    BenchmarkConfig,
    StrategyConfig,
    GameResult,
    ScorePercentiles,
    SimulationResults,
    StrategyComparison,
    ParsedReply,
)
from .llm_client import LLMClient
from .letter_analysis import (
    LetterStats,
    analyze_letter_frequencies,
    letters_by_expected_value,
    vowels_by_expected_value,
    consonants_by_expected_value,
    count_letter_hits,
)
from .strategies import Strategy, FrequencyStrategy, STRATEGIES, get_strategy
from .llm_strategy import LLMStrategy, parse_reply
from .simulator import build_strategy, simulate_game, run_simulation, summarize
from .analytics import (
    print_results,
    print_comparison_table,
    print_histogram,
    generate_insights,
    compare_strategies,
    export_comparison,
)

__all__ = [
    # Config and results
    "BenchmarkConfig",
    "StrategyConfig",
    "GameResult",
    "ScorePercentiles",
    "SimulationResults",
    "StrategyComparison",
    "ParsedReply",
    # LLM
    "LLMClient",
    "LLMStrategy",
    "parse_reply",
    # Letter analysis
    "LetterStats",
    "analyze_letter_frequencies",
    "letters_by_expected_value",
    "vowels_by_expected_value",
    "consonants_by_expected_value",
    "count_letter_hits",
    # Strategies
    "Strategy",
    "FrequencyStrategy",
    "STRATEGIES",
    "get_strategy",
    "build_strategy",
    # Running
    "simulate_game",
    "run_simulation",
    "summarize",
    # Reporting
    "print_results",
    "print_comparison_table",
    "print_histogram",
    "generate_insights",
    "compare_strategies",
    "export_comparison",
]
