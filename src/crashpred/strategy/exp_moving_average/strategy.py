"""Exponentially Weighted Moving Average Strategy.

Weights exp(i / n) across the window, bounded to a conservative range and
truncated to cents like the game's own display. Needs a full window; short
histories get the neutral 2.00x.
"""

from dataclasses import dataclass

from ...data import History
from ...indicators.moving_average import exp_weighted_average, truncate_to_cents
from ...indicators.statistics import std_dev
from ..base_strategy import BaseStrategy, StrategyConfig
from ..moving_average.strategy import stability_confidence
from ..registry import register_strategy
from ..types import NEUTRAL_MULTIPLIER, PredictionResult


@dataclass(frozen=True)
class ExpMovingAverageConfig(StrategyConfig):
    """Configuration for the exponentially weighted average.

    Args:
        window: Games in the average (also the minimum history)
        floor: Lowest prediction before truncation
        max_prediction: Highest prediction
        fallback_value: Prediction when history is shorter than the window
    """

    window: int | None = 50
    min_history: int = 50
    max_prediction: float = 10.0
    fallback_confidence: float = 25.0
    floor: float = 1.01
    fallback_value: float = NEUTRAL_MULTIPLIER


@register_strategy("exp_moving_average")
class ExpMovingAverageStrategy(BaseStrategy):
    """Exponentially weighted average with a fixed-value warmup fallback."""

    config: ExpMovingAverageConfig
    config_class = ExpMovingAverageConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        average = exp_weighted_average(values)
        bounded = min(max(average, self.config.floor), self.config.max_prediction)
        return PredictionResult(
            truncate_to_cents(bounded),
            stability_confidence(std_dev(values)),
            {"average": average},
        )

    def _fallback(self, history: History, reason: str) -> PredictionResult:
        return PredictionResult(
            self.config.fallback_value,
            self.config.fallback_confidence,
            {"reason": reason},
        )
