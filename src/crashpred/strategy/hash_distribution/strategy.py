"""Hash Distribution Strategy.

Crash multipliers come from a hash conversion that yields a heavy-tailed
distribution. This strategy models the tail with an EVT estimate and reacts
to streaks at the end of the history:

1. Three or more recent games above the tail threshold: expect a drop
   to 75% of the mean.
2. Five or more recent games below the mean: expect mean + 0.5 sd.
3. Recent volatility above 1.5x the long-run sd: take the lower of the
   long-run and recent means.
4. Otherwise: the mean shrunk by tail probability times the shape parameter.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.moving_average import truncate_to_cents
from ...indicators.statistics import describe
from ...indicators.volatility import evt_tail
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


def trailing_streaks(recent: np.ndarray, threshold: float, mean: float) -> tuple[int, int]:
    """Count the run of high or low games at the end of ``recent``.

    Walks backward: a game at or above ``threshold`` extends the high run and
    resets the low run, a game below ``mean`` does the opposite, and anything
    in between stops the walk.

    Returns:
        Tuple of (high_streak, low_streak)
    """
    high = 0
    low = 0
    for value in recent[::-1]:
        if value >= threshold:
            high += 1
            low = 0
        elif value < mean:
            low += 1
            high = 0
        else:
            break
    return high, low


@dataclass(frozen=True)
class HashDistributionConfig(StrategyConfig):
    """Configuration for the hash distribution model.

    Args:
        window: Games for the long-run distribution
        recent_games: Games for recent mean, volatility and streaks
        high_streak: High streak length that predicts a drop
        low_streak: Low streak length that predicts a rise
        floor: Lowest prediction
    """

    window: int | None = 50000
    recent_games: int = 20
    high_streak: int = 3
    low_streak: int = 5
    floor: float = 1.01
    min_confidence: float = 30.0
    max_confidence: float = 90.0


@register_strategy("hash_distribution")
class HashDistributionStrategy(BaseStrategy):
    """EVT tail model with streak-based regression to the mean."""

    config: HashDistributionConfig
    config_class = HashDistributionConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        stats = describe(values)
        tail = evt_tail(values)

        recent = values[-self.config.recent_games :]
        recent_mean = float(np.mean(recent))
        recent_volatility = float(np.std(recent))
        high, low = trailing_streaks(recent, tail.threshold, stats.mean)

        if high >= self.config.high_streak:
            case = "high_streak"
            prediction = stats.mean * 0.75
            confidence = min(85.0, 60 + high * 5)
        elif low >= self.config.low_streak:
            case = "low_streak"
            prediction = stats.mean + stats.std_dev * 0.5
            confidence = min(80.0, 55 + low * 3)
        elif recent_volatility > stats.std_dev * 1.5:
            case = "volatile"
            prediction = min(stats.mean, recent_mean)
            confidence = 45.0
        else:
            case = "tail_adjusted"
            prediction = stats.mean * (1 - tail.tail_probability * tail.shape)
            relative = recent_volatility / stats.std_dev if stats.std_dev > 0 else 0.0
            confidence = 50 + 10 * (1 - relative)

        prediction = max(self.config.floor, min(prediction, stats.mean + 3 * stats.std_dev))
        prediction = truncate_to_cents(prediction)
        confidence = float(np.clip(confidence, self.config.min_confidence, self.config.max_confidence))

        logger.debug(
            f"Mean={stats.mean:.2f} recent={recent_mean:.2f} case={case} "
            f"tail p={tail.tail_probability:.4f} xi={tail.shape:.3f} -> {prediction:.2f}x"
        )
        return PredictionResult(
            prediction,
            confidence,
            {"case": case, "tail_probability": tail.tail_probability, "shape": tail.shape},
        )
