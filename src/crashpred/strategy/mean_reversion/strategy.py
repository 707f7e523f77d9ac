"""Mean Reversion Strategy.

Extreme games tend to be followed by values nearer the average. The last
game's z-score against the window decides how far to pull toward the mean:

1. |z| > 1.5: 60% of the way back, confidence 60 + 10|z| (max 80)
2. |z| > 0.5: 30% of the way back, confidence 55
3. Otherwise: predict the mean, confidence 50

The prediction never exceeds mean + 2 sd.
"""

import logging
from dataclasses import dataclass

from ...data import History
from ...indicators.statistics import describe, z_score
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeanReversionConfig(StrategyConfig):
    """Configuration for mean reversion.

    Args:
        window: Games defining the mean
        strong_z: |z| above this triggers strong reversion
        moderate_z: |z| above this triggers moderate reversion
        strong_reversion: Fraction of the gap closed on strong reversion
        moderate_reversion: Fraction of the gap closed on moderate reversion
        upper_band_sd: Cap at mean + upper_band_sd * sd
    """

    window: int | None = 300
    min_history: int = 2
    strong_z: float = 1.5
    moderate_z: float = 0.5
    strong_reversion: float = 0.6
    moderate_reversion: float = 0.3
    upper_band_sd: float = 2.0


@register_strategy("mean_reversion")
class MeanReversionStrategy(BaseStrategy):
    """Pull the last game back toward the window mean."""

    config: MeanReversionConfig
    config_class = MeanReversionConfig

    def _predict(self, window: History) -> PredictionResult:
        stats = describe(window.multipliers)
        last = window.last.multiplier
        z = z_score(last, window.multipliers)

        if abs(z) > self.config.strong_z:
            prediction = last + self.config.strong_reversion * (stats.mean - last)
            confidence = min(80.0, 60 + abs(z) * 10)
        elif abs(z) > self.config.moderate_z:
            prediction = last + self.config.moderate_reversion * (stats.mean - last)
            confidence = 55.0
        else:
            prediction = stats.mean
            confidence = 50.0

        prediction = min(prediction, stats.mean + self.config.upper_band_sd * stats.std_dev)

        logger.debug(
            f"Last={last:.2f}x mean={stats.mean:.2f}x z={z:.2f} -> {prediction:.2f}x"
        )
        return PredictionResult(prediction, confidence, {"z_score": z, "mean": stats.mean})
