"""
Game simulator.

Drives the real engine through ``reduce`` with a Strategy making every
decision, then aggregates many games into SimulationResults.
"""

import logging
import math
import random
import statistics
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel

from ..content.generator import generate_puzzle
from ..engine.config import GameConfig
from ..engine.errors import CascadeError
from ..engine.machine import (
    GuessLetter,
    SelectWord,
    SkipToWords,
    SubmitWords,
    UpdateWordInput,
    UseHint,
    reduce,
)
from ..engine.models import Puzzle
from ..engine.phases import can_skip_to_words
from ..engine.scoring import calculate_final_score, get_score_breakdown
from ..utils.board import render_board, render_status
from .letter_analysis import count_letter_hits
from .llm_strategy import LLMStrategy
from .models import GameResult, ScorePercentiles, SimulationResults, StrategyConfig
from .strategies import Strategy, best_legal_letter, get_strategy


logger = logging.getLogger(__name__)


def build_strategy(config: Union[StrategyConfig, str]) -> Strategy:
    """
    Create a strategy from its configuration.

    A config with a ``model`` (or the name "llm") builds an LLMStrategy;
    anything else is looked up among the synthetic strategies.
    """
    if isinstance(config, str):
        config = StrategyConfig(name=config)

    if config.model or config.name == "llm":
        if not config.model:
            raise ValueError("The 'llm' strategy needs a model")
        llm_kwargs = {
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }
        # Add any extra kwargs from the config (e.g., reasoning params)
        if hasattr(config, '__pydantic_extra__') and config.__pydantic_extra__:
            llm_kwargs.update(config.__pydantic_extra__)
        name = None if config.name == "llm" else config.name
        return LLMStrategy.create(model=config.model, name=name, **llm_kwargs)

    return get_strategy(config.name)


class GameRun:
    """Mutable driver around one immutable puzzle value."""

    def __init__(self, puzzle: Puzzle, verbose: bool = False):
        self.puzzle = puzzle
        self.verbose = verbose
        self.actions: List[Dict[str, Any]] = []
        self.errors: List[str] = []

    def apply(self, action: BaseModel) -> bool:
        """Apply an action; record it, or record the engine's error and keep the puzzle."""
        try:
            self.puzzle = reduce(self.puzzle, action)
        except CascadeError as e:
            self.errors.append(str(e))
            logger.debug("Rejected %s: %s", action.model_dump(), e)
            if self.verbose:
                print(f"  ❌ {e}")
            return False
        self.actions.append(action.model_dump())
        return True


def play_letter_phase(run: GameRun, strategy: Strategy, rng: random.Random) -> None:
    """Ask the strategy for letters until it skips or the guesses run out."""
    # Every turn either guesses a letter or skips, so this bounds a misbehaving strategy
    for _ in range(run.puzzle.config.max_letter_guesses * 3):
        if run.puzzle.phase != "guessing-letters":
            return
        letter = strategy.choose_letter(run.puzzle, rng)

        if letter is None:
            if run.apply(SkipToWords()):
                if run.verbose:
                    print("  SKIP to word phase")
                continue
            letter = best_legal_letter(run.puzzle)

        if letter is None:
            break
        if not run.apply(GuessLetter(letter=letter)):
            letter = best_legal_letter(run.puzzle)
            if letter is None or not run.apply(GuessLetter(letter=letter)):
                break
        if run.verbose:
            hits = count_letter_hits(letter, [w.word for w in run.puzzle.words])
            print(f"  Guess {letter}: {'hit ' + str(hits) if hits else 'miss'} | score {run.puzzle.score}")

    if run.puzzle.phase == "guessing-letters" and not (can_skip_to_words(run.puzzle) and run.apply(SkipToWords())):
        raise RuntimeError(f"Strategy '{strategy.name}' never left the letter phase")


def play_word_phase(run: GameRun, strategy: Strategy, rng: random.Random) -> None:
    """Spend hints, type every unsolved word, then submit."""
    for word_index, letter_index in strategy.hints_for(run.puzzle, rng):
        if run.apply(UseHint(word_index=word_index, letter_index=letter_index)) and run.verbose:
            print(f"  Hint: word {word_index + 1}, letter {letter_index + 1}")

    for i, word in enumerate(run.puzzle.words):
        if word.guessed or word.auto_completed:
            continue
        guess = strategy.fill_word(run.puzzle, i, rng).upper()
        if len(guess) != len(word.word):
            run.errors.append(f"Guess '{guess}' for word {i + 1} has the wrong length")
            continue
        letters = tuple("" if r else g for g, r in zip(guess, word.revealed))
        run.apply(SelectWord(index=i))
        run.apply(UpdateWordInput(index=i, letters=letters))
        if run.verbose:
            print(f"  Word {i + 1}: typed {guess} (answer {word.word})")

    if not run.apply(SubmitWords()):
        raise RuntimeError("Submitting the word phase failed")


def simulate_game(
    strategy: Strategy,
    config: Optional[GameConfig] = None,
    seed: Optional[int] = None,
    verbose: bool = False,
    puzzle: Optional[Puzzle] = None,
) -> GameResult:
    """
    Play one full game with a strategy against the real engine.

    Args:
        strategy: The player
        config: Rules and scoring (defaults to GameConfig())
        seed: Seed for both puzzle generation and the strategy's rolls
        verbose: Print the game as it is played
        puzzle: Play this puzzle instead of generating one

    Returns:
        GameResult for the finished game
    """
    config = config or GameConfig()
    rng = random.Random(seed)
    if puzzle is None:
        puzzle = generate_puzzle(seed=rng.randrange(2 ** 32), config=config)

    run = GameRun(puzzle, verbose=verbose)
    strategy.new_game(rng)

    if verbose:
        print(f"\n{'=' * 60}")
        print(f"Strategy: {strategy.name} | Key word: {puzzle.key_word} | Cascade: {puzzle.cascade_word.word}")
        print(render_board(puzzle, show_answers=True))
        print("-" * 60)

    play_letter_phase(run, strategy, rng)
    letter_phase_score = run.puzzle.score
    if verbose:
        print(render_board(run.puzzle))
        print(render_status(run.puzzle))

    play_word_phase(run, strategy, rng)
    final = run.puzzle

    replayed = calculate_final_score(final)
    if replayed != final.score:
        raise AssertionError(f"Score mismatch: engine {final.score}, recomputed {replayed}")

    cascade_bonus = final.config.scoring.cascade_flat_bonus if final.cascade_awarded else 0
    answers = [w.word for w in final.words]
    usage = strategy.consume_usage()
    errors = run.errors + strategy.consume_errors()

    if verbose:
        print(render_board(final))
        for item in get_score_breakdown(final):
            detail = f" ({item.detail})" if item.detail else ""
            print(f"  {item.label}: {item.points:+d}{detail}")
        print(f"Final score: {final.score}")

    logger.debug("Game finished: strategy=%s score=%d errors=%d", strategy.name, final.score, len(errors))

    return GameResult(
        total_score=final.score,
        letter_phase_score=letter_phase_score,
        word_phase_score=final.score - letter_phase_score - cascade_bonus,
        cascade_bonus=cascade_bonus,
        letters_guessed=len(final.guessed_letters),
        letter_hits=sum(count_letter_hits(letter, answers) for letter in final.guessed_letters),
        vowels_used=final.guessed_vowels,
        hints_used=sum(w.hints_used for w in final.words),
        words_correct=final.words_correct,
        words_auto_completed=sum(1 for w in final.words if w.auto_completed),
        blanks_at_word_phase=sum(w.blanks_at_word_phase for w in final.words),
        cascade_earned=final.cascade_awarded,
        errors=errors,
        actions=run.actions,
        prompt_tokens=usage.get("prompt_tokens"),
        completion_tokens=usage.get("completion_tokens"),
        total_tokens=usage.get("total_tokens"),
    )


def average(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def percentile(values: List[int], p: float) -> int:
    """Nearest-rank percentile (p in 0-100)."""
    if not values:
        return 0
    ordered = sorted(values)
    index = math.ceil(p / 100 * len(ordered)) - 1
    return ordered[max(0, index)]


def summarize(strategy_name: str, results: List[GameResult]) -> SimulationResults:
    """Aggregate per-game results into averages, spread and percentiles."""
    if not results:
        return SimulationResults(strategy_name=strategy_name, iterations=0)

    scores = [r.total_score for r in results]
    avg_letters = average([r.letters_guessed for r in results])

    return SimulationResults(
        strategy_name=strategy_name,
        iterations=len(results),
        avg_total_score=average(scores),
        avg_letter_phase_score=average([r.letter_phase_score for r in results]),
        avg_word_phase_score=average([r.word_phase_score for r in results]),
        avg_cascade_bonus=average([r.cascade_bonus for r in results]),
        avg_letters_guessed=avg_letters,
        avg_letter_hit_rate=average([r.letter_hits for r in results]) / max(1.0, avg_letters),
        avg_words_correct=average([r.words_correct for r in results]),
        avg_words_auto_completed=average([r.words_auto_completed for r in results]),
        avg_blanks_at_word_phase=average([r.blanks_at_word_phase for r in results]),
        cascade_earned_rate=sum(1 for r in results if r.cascade_earned) / len(results),
        score_std_dev=statistics.pstdev(scores),
        min_score=min(scores),
        max_score=max(scores),
        score_percentiles=ScorePercentiles(
            p10=percentile(scores, 10),
            p25=percentile(scores, 25),
            p50=percentile(scores, 50),
            p75=percentile(scores, 75),
            p90=percentile(scores, 90),
        ),
        all_results=results,
    )


def run_simulation(
    strategy: Union[Strategy, StrategyConfig, str],
    iterations: int = 1000,
    config: Optional[GameConfig] = None,
    seed: Optional[int] = None,
    verbose: bool = False,
    verbose_games: int = 3,
) -> SimulationResults:
    """
    Play many games with one strategy and aggregate the results.

    Args:
        strategy: Strategy instance, config or synthetic strategy name
        iterations: Number of games
        config: Rules and scoring shared by every game
        seed: Master seed; each game gets its own seed drawn from it
        verbose: Print progress and the first ``verbose_games`` games
        verbose_games: Number of games printed in full when verbose

    Returns:
        Aggregated SimulationResults
    """
    if not isinstance(strategy, Strategy):
        strategy = build_strategy(strategy)
    config = config or GameConfig()
    master = random.Random(seed)

    if verbose:
        print(f"\nRunning {iterations} simulations with '{strategy.name}' strategy...")
    logger.info("Simulating %d games with strategy '%s'", iterations, strategy.name)

    progress_step = max(1, iterations // 10)
    results = []
    for i in range(iterations):
        result = simulate_game(
            strategy,
            config=config,
            seed=master.randrange(2 ** 32),
            verbose=verbose and i < verbose_games,
        )
        results.append(result)

        if (i + 1) % progress_step == 0:
            logger.info("  Completed %d/%d", i + 1, iterations)
            if verbose:
                print(f"  Completed {i + 1}/{iterations}")

    return summarize(strategy.name, results)
