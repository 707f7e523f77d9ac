"""Recent Average Strategy.

Baseline: the next multiplier is the mean of the last N games.
"""

from dataclasses import dataclass

import numpy as np

from ...data import History
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult


@dataclass(frozen=True)
class RecentAverageConfig(StrategyConfig):
    """Configuration for the recent average baseline."""

    window: int | None = 100
    confidence: float = 50.0


@register_strategy("recent_average")
class RecentAverageStrategy(BaseStrategy):
    """Mean of the trailing window at a fixed confidence."""

    config: RecentAverageConfig
    config_class = RecentAverageConfig

    def _predict(self, window: History) -> PredictionResult:
        average = float(np.mean(window.multipliers))
        return PredictionResult(average, self.config.confidence, {"average": average})
