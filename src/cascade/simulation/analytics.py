"""Reporting for simulation results: summaries, comparison table, histogram and export."""

import json
import math
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..engine.config import GameConfig
from .models import BenchmarkConfig, SimulationResults, StrategyComparison, StrategyConfig
from .simulator import run_simulation
from .strategies import Strategy


def _share(part: float, total: float) -> str:
    return f"{(part / total) * 100:.1f}%" if total else "n/a"


def print_results(results: SimulationResults) -> None:
    """Print detailed results for a single strategy."""
    print(f"\n{'=' * 60}")
    print(f"STRATEGY: {results.strategy_name.upper()}")
    print(f"Iterations: {results.iterations:,}")
    print("=" * 60)

    print("\nSCORE SUMMARY:")
    print(f"  Average Total Score:  {round(results.avg_total_score):,}")
    print(f"  Standard Deviation:   {round(results.score_std_dev):,}")
    print(f"  Min / Max:            {results.min_score:,} / {results.max_score:,}")

    total = results.avg_total_score
    print("\nSCORE BREAKDOWN:")
    print(f"  Letter Phase:         {round(results.avg_letter_phase_score):,} pts ({_share(results.avg_letter_phase_score, total)})")
    print(f"  Word Phase:           {round(results.avg_word_phase_score):,} pts ({_share(results.avg_word_phase_score, total)})")
    print(f"  Cascade Bonus:        {round(results.avg_cascade_bonus):,} pts ({_share(results.avg_cascade_bonus, total)})")

    print("\nLETTER PHASE STATS:")
    print(f"  Avg Letters Guessed:  {results.avg_letters_guessed:.1f}")
    print(f"  Avg Hit Rate:         {results.avg_letter_hit_rate:.2f} words/letter")

    print("\nWORD PHASE STATS:")
    print(f"  Avg Words Correct:    {results.avg_words_correct:.1f} / 5")
    print(f"  Avg Auto-Completed:   {results.avg_words_auto_completed:.1f}")
    print(f"  Avg Blanks at Start:  {results.avg_blanks_at_word_phase:.1f}")
    print(f"  Cascade Earned Rate:  {results.cascade_earned_rate * 100:.1f}%")

    p = results.score_percentiles
    print("\nSCORE PERCENTILES:")
    print(f"  10th: {p.p10:,}")
    print(f"  25th: {p.p25:,}")
    print(f"  50th: {p.p50:,} (median)")
    print(f"  75th: {p.p75:,}")
    print(f"  90th: {p.p90:,}")


def print_comparison_table(comparison: StrategyComparison) -> None:
    """Print one row per strategy followed by the insights."""
    print("\n" + "=" * 100)
    print("STRATEGY COMPARISON")
    print("=" * 100)

    header = (
        f"{'Strategy':<16} {'Avg Score':>9} {'Letter Pts':>10} {'Word Pts':>10} "
        f"{'Cascade':>8} {'Std Dev':>9} {'Words OK':>8} {'Cascade%':>8}"
    )
    print("\n" + header)
    print("-" * len(header))
    for r in comparison.strategies:
        print(
            f"{r.strategy_name:<16} {round(r.avg_total_score):>9} {round(r.avg_letter_phase_score):>10} "
            f"{round(r.avg_word_phase_score):>10} {round(r.avg_cascade_bonus):>8} "
            f"{round(r.score_std_dev):>9} {r.avg_words_correct:>8.1f} "
            f"{f'{r.cascade_earned_rate * 100:.0f}%':>8}"
        )

    if comparison.insights:
        print("\nKEY INSIGHTS:")
        for i, insight in enumerate(comparison.insights, 1):
            print(f"  {i}. {insight}")


def generate_insights(strategies: Sequence[SimulationResults]) -> List[str]:
    """
    Plain-language observations about a set of strategy results.

    Covers the best strategy, the most and least consistent ones, phase
    balance, the highest cascade rate and the overall score spread.
    """
    if not strategies:
        return []
    insights = []

    by_score = sorted(strategies, key=lambda s: s.avg_total_score, reverse=True)
    best, worst = by_score[0], by_score[-1]
    insights.append(f"Best strategy: '{best.strategy_name}' with avg score {round(best.avg_total_score)}")

    by_spread = sorted(strategies, key=lambda s: s.score_std_dev)
    insights.append(f"Most consistent: '{by_spread[0].strategy_name}' (σ={round(by_spread[0].score_std_dev)})")
    insights.append(f"Most variable: '{by_spread[-1].strategy_name}' (σ={round(by_spread[-1].score_std_dev)})")

    letter_heavy = next((s for s in strategies if s.avg_letter_phase_score > s.avg_word_phase_score), None)
    word_heavy = next((s for s in strategies if s.avg_word_phase_score > s.avg_letter_phase_score * 1.5), None)
    if letter_heavy:
        insights.append(f"'{letter_heavy.strategy_name}' earns more from letter phase than word phase")
    if word_heavy:
        insights.append(f"'{word_heavy.strategy_name}' relies heavily on word phase multipliers")

    by_cascade = max(strategies, key=lambda s: s.cascade_earned_rate)
    insights.append(
        f"Highest cascade rate: '{by_cascade.strategy_name}' at {by_cascade.cascade_earned_rate * 100:.0f}%"
    )

    mean_score = sum(s.avg_total_score for s in strategies) / len(strategies)
    spread = (best.avg_total_score - worst.avg_total_score) / mean_score * 100 if mean_score else 0.0
    if spread < 15:
        insights.append("✓ Strategies are well-balanced (< 15% score difference)")
    elif spread < 25:
        insights.append("⚠ Moderate strategy imbalance (15-25% score difference)")
    else:
        insights.append("✗ Significant strategy imbalance (> 25% score difference)")

    return insights


def print_histogram(results: SimulationResults, buckets: int = 10, width: int = 40) -> None:
    """Print the score distribution as a horizontal bar chart."""
    scores = [r.total_score for r in results.all_results]
    if not scores:
        print(f"\nSCORE DISTRIBUTION ({results.strategy_name}): no games")
        return

    low, high = min(scores), max(scores)
    bucket_size = max(1, math.ceil((high - low) / buckets))
    print(f"\nSCORE DISTRIBUTION ({results.strategy_name}):")
    print(f"Range: {low} - {high}, Bucket size: {bucket_size}")

    counts = [0] * buckets
    for score in scores:
        counts[min(buckets - 1, (score - low) // bucket_size)] += 1

    scale = width / max(counts)
    for i, count in enumerate(counts):
        start = low + i * bucket_size
        bar = "█" * round(count * scale)
        print(f"{start:>5}-{start + bucket_size - 1:>5} │ {bar} {count / len(scores) * 100:.1f}%")


def compare_strategies(
    strategies: Sequence[Union[Strategy, StrategyConfig, str]],
    iterations: int = 1000,
    config: Optional[GameConfig] = None,
    seed: Optional[int] = None,
    verbose: bool = False,
    verbose_games: int = 3,
    benchmark_config: Optional[BenchmarkConfig] = None,
) -> StrategyComparison:
    """
    Run every strategy over the same seed sequence and build a comparison.

    Each strategy sees the same puzzles when a seed is given, so score
    differences come from play rather than puzzle luck.
    """
    started_at = datetime.now()
    results = []
    for strategy in strategies:
        result = run_simulation(
            strategy,
            iterations=iterations,
            config=config,
            seed=seed,
            verbose=verbose,
            verbose_games=verbose_games,
        )
        if verbose:
            print_results(result)
        results.append(result)
    ended_at = datetime.now()

    return StrategyComparison(
        strategies=results,
        insights=generate_insights(results),
        config=benchmark_config,
        started_at=started_at.isoformat(),
        ended_at=ended_at.isoformat(),
        duration_seconds=(ended_at - started_at).total_seconds(),
    )


def export_comparison(comparison: StrategyComparison, path: Union[str, Path]) -> None:
    """
    Save a comparison to JSON without the raw per-game results.

    Args:
        comparison: The comparison to save
        path: Output file; parent directories are created
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = comparison.model_dump(exclude={"strategies": {"__all__": {"all_results"}}})
    with open(path, 'w') as f:
        json.dump(data, f, indent=2, default=str)
