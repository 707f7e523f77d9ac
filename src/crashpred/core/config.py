"""Runtime settings loaded from the environment."""

import logging
from dataclasses import dataclass
from os import environ
from pathlib import Path

from dotenv import load_dotenv

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class PredictorSettings:
    """Host-side settings for running strategies.

    Args:
        strategies: Strategy names to run (empty = every registered strategy)
        seed: Seed for the randomized strategies (None = fresh entropy per call)
        log_level: Root log level name
    """

    strategies: tuple[str, ...] = ()
    seed: int | None = None
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_seed(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"CRASHPRED_SEED must be an integer, got {raw!r}") from None


def load_settings(env_path: Path | None = None) -> PredictorSettings:
    """Load settings from environment variables.

    Environment variables:
        CRASHPRED_STRATEGIES: Comma separated strategy names (default: all)
        CRASHPRED_SEED: Integer seed for randomized strategies (default: unset)
        CRASHPRED_LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default: WARNING)

    Args:
        env_path: Path to .env file, defaults to .env in current directory

    Returns:
        PredictorSettings

    Raises:
        ValueError: If the seed or log level is invalid
    """
    load_dotenv(env_path or Path(".env"))

    raw_names = environ.get("CRASHPRED_STRATEGIES", "")
    strategies = tuple(name.strip() for name in raw_names.split(",") if name.strip())

    log_level = environ.get("CRASHPRED_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"CRASHPRED_LOG_LEVEL must be one of {_LOG_LEVELS}, got {log_level!r}")

    return PredictorSettings(
        strategies=strategies,
        seed=_parse_seed(environ.get("CRASHPRED_SEED")),
        log_level=log_level,
    )
