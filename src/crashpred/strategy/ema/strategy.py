"""Adaptive EMA Strategy.

Exponential moving average whose smoothing factor grows with volatility:
alpha is half the mean absolute game-to-game change, kept within
[0.1, 0.3]. Confidence drops by two points for every trend reversal in the
opening games of the window.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.momentum import trend_changes
from ...indicators.moving_average import adaptive_alpha, ema
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmaConfig(StrategyConfig):
    """Configuration for the adaptive EMA.

    Args:
        window: Games fed to the EMA
        alpha_min: Smoothing factor for calm windows
        alpha_max: Smoothing factor for volatile windows
        consistency_games: Games scanned for trend reversals
        reversal_penalty: Confidence lost per reversal
    """

    window: int | None = 200
    min_history: int = 2
    alpha_min: float = 0.1
    alpha_max: float = 0.3
    consistency_games: int = 50
    reversal_penalty: float = 2.0
    min_confidence: float = 40.0
    max_confidence: float = 85.0


@register_strategy("ema")
class EmaStrategy(BaseStrategy):
    """Volatility-adaptive exponential moving average."""

    config: EmaConfig
    config_class = EmaConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        alpha = adaptive_alpha(values, self.config.alpha_min, self.config.alpha_max)
        prediction = ema(values, alpha)

        reversals = trend_changes(values[: self.config.consistency_games])
        confidence = float(
            np.clip(
                self.config.max_confidence - reversals * self.config.reversal_penalty,
                self.config.min_confidence,
                self.config.max_confidence,
            )
        )

        logger.debug(f"EMA={prediction:.2f}x alpha={alpha:.3f} reversals={reversals}")
        return PredictionResult(prediction, confidence, {"alpha": alpha, "reversals": reversals})
