"""CLI entry point for running strategies over a recorded history.

Usage:
    python -m crashpred history.csv
    python -m crashpred history.json --strategy markov_chain --strategy ema
    python -m crashpred history.csv --seed 7 --log-level INFO
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .core import configure_logging, load_settings
from .data.loader import load_history
from .strategy import predict_all

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="crashpred",
        description="Predict the next crash multiplier from a game history",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m crashpred history.csv
  python -m crashpred history.json --strategy markov_chain --strategy ema
  python -m crashpred history.csv --seed 7 --log-level INFO
        """,
    )

    parser.add_argument(
        "history",
        type=Path,
        help="CSV or JSON file with gameNumber and multiplier columns",
    )
    parser.add_argument(
        "--strategy",
        action="append",
        dest="strategies",
        metavar="NAME",
        help="Strategy to run, repeatable (default: CRASHPRED_STRATEGIES or all)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for randomized strategies (default: CRASHPRED_SEED)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (default: CRASHPRED_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = parse_args(argv)

    try:
        settings = load_settings(args.env_file)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging(args.log_level or settings.log_level_value)

    names = args.strategies or list(settings.strategies) or None
    seed = args.seed if args.seed is not None else settings.seed

    try:
        history = load_history(args.history)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Loaded {len(history)} games from {args.history}")

    try:
        results = predict_all(history, names=names, seed=seed)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 2

    output = {name: result.to_dict() for name, result in results.items()}
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
