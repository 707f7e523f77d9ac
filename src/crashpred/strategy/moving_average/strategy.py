"""Weighted Moving Average Strategy.

Linear weights 1..n so the latest game counts most. Confidence falls as
the window's standard deviation rises.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.moving_average import linear_wma
from ...indicators.statistics import std_dev
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


def stability_confidence(sd: float, floor: float = 30.0, ceiling: float = 90.0) -> float:
    """100 - 10 * sd, clipped to [floor, ceiling]."""
    return float(np.clip(100 - sd * 10, floor, ceiling))


@dataclass(frozen=True)
class MovingAverageConfig(StrategyConfig):
    """Configuration for the weighted moving average.

    Args:
        window: Games in the average
        min_confidence: Confidence floor for very volatile windows
        max_confidence: Confidence ceiling for flat windows
    """

    window: int | None = 50
    min_confidence: float = 30.0
    max_confidence: float = 90.0


@register_strategy("moving_average")
class MovingAverageStrategy(BaseStrategy):
    """Linearly weighted average of the trailing window."""

    config: MovingAverageConfig
    config_class = MovingAverageConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        prediction = linear_wma(values)
        sd = std_dev(values)
        confidence = stability_confidence(
            sd, self.config.min_confidence, self.config.max_confidence
        )
        logger.debug(f"WMA={prediction:.2f}x sd={sd:.2f} over {len(values)} games")
        return PredictionResult(prediction, confidence, {"std_dev": sd})
