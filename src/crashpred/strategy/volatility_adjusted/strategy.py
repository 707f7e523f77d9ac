"""Volatility-Adjusted Strategy.

Blends the last game with the window mean, leaning on the mean as the
coefficient of variation rises, and keeps the result within one standard
deviation of the mean.
"""

import logging
from dataclasses import dataclass

from ...data import History
from ...indicators.statistics import describe
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VolatilityAdjustedConfig(StrategyConfig):
    """Configuration for the volatility-adjusted blend.

    Args:
        window: Games for mean and deviation
        low_cv: Coefficient of variation below which volatility is low
        high_cv: Coefficient of variation at or above which volatility is high
    """

    window: int | None = 100
    low_cv: float = 0.5
    high_cv: float = 1.0


# (weight on last game, confidence) per volatility tier
_TIERS = {
    "low": (0.7, 70.0),
    "medium": (0.5, 55.0),
    "high": (0.3, 40.0),
}


@register_strategy("volatility_adjusted")
class VolatilityAdjustedStrategy(BaseStrategy):
    """Trust the last game in calm windows, the mean in volatile ones."""

    config: VolatilityAdjustedConfig
    config_class = VolatilityAdjustedConfig

    def _tier(self, cv: float) -> str:
        if cv < self.config.low_cv:
            return "low"
        if cv < self.config.high_cv:
            return "medium"
        return "high"

    def _predict(self, window: History) -> PredictionResult:
        stats = describe(window.multipliers)
        cv = stats.coefficient_of_variation
        tier = self._tier(cv)
        last_weight, confidence = _TIERS[tier]

        last = window.last.multiplier
        prediction = last * last_weight + stats.mean * (1 - last_weight)
        prediction = min(max(prediction, stats.mean - stats.std_dev), stats.mean + stats.std_dev)

        logger.debug(f"CV={cv:.3f} ({tier}) mean={stats.mean:.2f}x -> {prediction:.2f}x")
        return PredictionResult(prediction, confidence, {"cv": cv, "tier": tier})
