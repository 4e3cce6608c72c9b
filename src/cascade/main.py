"""
Main entry point for running balance simulations.

Usage:
    python -m cascade.main config.yaml
    python -m cascade.main config.yaml --output results/run1.json --verbose
    python -m cascade.main --strategy aggressive --strategy conservative --iterations 500
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import yaml

from .engine import GameConfig
from .simulation import (
    BenchmarkConfig,
    StrategyConfig,
    compare_strategies,
    export_comparison,
    print_comparison_table,
    print_histogram,
)


def load_config(config_path: str) -> BenchmarkConfig:
    """Load simulation configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return BenchmarkConfig(**data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run Cascade balance simulations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  iterations: 1000
  seed: 42
  strategies:
    - name: aggressive
    - name: conservative
    - name: llm
      model: gpt-4o
      temperature: 0.7
  overrides:
    max_hints: 2
    scoring:
      cascade_flat_bonus: 400
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults apply when omitted)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: results/simulation_<timestamp>.json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and sample games to stdout"
    )
    parser.add_argument(
        "--strategy", "-s",
        action="append",
        dest="strategies",
        help="Strategy to run (repeatable); replaces the configured list"
    )
    parser.add_argument(
        "--iterations", "-n",
        type=int,
        help="Games per strategy; overrides the config"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else BenchmarkConfig()
        if args.strategies:
            config = config.model_copy(update={"strategies": [StrategyConfig(name=n) for n in args.strategies]})
        if args.iterations is not None:
            if args.iterations < 1:
                raise ValueError("--iterations must be at least 1")
            config = config.model_copy(update={"iterations": args.iterations})
        game_config = GameConfig().with_overrides(config.overrides)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Determine output path
    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"simulation_{timestamp}.json"

    if args.verbose:
        print(f"Config: {args.config or '(defaults)'}")
        print(f"Output: {output_path}")
        print(f"Strategies: {', '.join(s.name for s in config.strategies)}")
        print()

    try:
        comparison = compare_strategies(
            config.strategies,
            iterations=config.iterations,
            config=game_config,
            seed=config.seed,
            verbose=args.verbose,
            verbose_games=config.verbose_games,
            benchmark_config=config,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error during simulation: {e}", file=sys.stderr)
        return 1

    export_comparison(comparison, output_path)

    print_comparison_table(comparison)
    if args.verbose:
        for results in comparison.strategies:
            print_histogram(results)

    print()
    print("=== Simulation Summary ===")
    print(f"Strategies: {len(comparison.strategies)}")
    print(f"Games per strategy: {config.iterations}")
    print(f"Duration: {comparison.duration_seconds:.2f}s")
    print(f"Results saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
