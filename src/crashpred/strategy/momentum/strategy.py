"""Momentum Strategy.

Strong one-directional runs are expected to continue; otherwise the next
game is expected halfway between the last game and the recent average.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.momentum import momentum
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MomentumConfig(StrategyConfig):
    """Configuration for momentum.

    Args:
        window: Games scanned for directional moves
        strong_trend: Trend strength above which the trend is followed
        continuation: Fraction of the momentum score added to the last game
        weak_confidence: Confidence when the trend is weak
        upper_multiple: Cap at this multiple of the window average
    """

    window: int | None = 30
    min_history: int = 2
    strong_trend: float = 0.6
    continuation: float = 0.5
    weak_confidence: float = 45.0
    upper_multiple: float = 2.0


@register_strategy("momentum")
class MomentumStrategy(BaseStrategy):
    """Follow strong trends, otherwise split the difference with the average."""

    config: MomentumConfig
    config_class = MomentumConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        result = momentum(values)
        average = float(np.mean(values))
        last = window.last.multiplier

        if result.trend_strength > self.config.strong_trend:
            prediction = last + result.score * self.config.continuation
            confidence = min(75.0, 60 + result.trend_strength * 20)
        else:
            prediction = (last + average) / 2
            confidence = self.config.weak_confidence

        prediction = min(prediction, average * self.config.upper_multiple)

        logger.debug(
            f"Score={result.score:.3f} strength={result.trend_strength:.2f} -> {prediction:.2f}x"
        )
        return PredictionResult(
            prediction,
            confidence,
            {"score": result.score, "trend_strength": result.trend_strength},
        )
