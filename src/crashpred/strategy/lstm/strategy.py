"""Stacked LSTM Strategy.

Runs the last 50 games, min-max scaled, through two stacked LSTM layers
with freshly drawn weights and reads out one value. The network is never
trained, so the output is a random projection of the sequence near the
window's range; a short trend adjustment is added on top. Confidence comes
from the window's coefficient of variation, not from the network.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.statistics import coefficient_of_variation
from ...network import StackedLstm, min_max_normalize
from ..base_strategy import RandomizedConfig, RandomizedStrategy
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LstmConfig(RandomizedConfig):
    """Configuration for the stacked LSTM.

    Args:
        window: Sequence length (also the minimum history)
        hidden_size: Hidden units per layer
        layers: Stacked LSTM layers
        trend_games: Games spanned by the trend adjustment
        trend_weight: Weight of the trend adjustment
        network_cap: Clamp on the raw network output before the trend adjustment
    """

    window: int | None = 50
    min_history: int = 50
    max_prediction: float = 20.0
    fallback_window: int = 50
    fallback_confidence: float = 30.0
    hidden_size: int = 32
    layers: int = 2
    trend_games: int = 5
    trend_weight: float = 0.3
    network_cap: float = 20.0


@register_strategy("lstm")
class LstmStrategy(RandomizedStrategy):
    """Untrained stacked LSTM forward pass with a trend adjustment."""

    config: LstmConfig
    config_class = LstmConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        normalized, lo, span = min_max_normalize(values)

        network = StackedLstm(
            self._generator(),
            hidden_size=self.config.hidden_size,
            layers=self.config.layers,
        )
        raw = network.forward(normalized) * span + lo
        prediction = min(max(raw, 1.0), self.config.network_cap)

        cv = coefficient_of_variation(values)
        confidence = float(np.clip(75 - cv * 40, 35, 75))

        recent = values[-self.config.trend_games :]
        trend = (recent[-1] - recent[0]) / self.config.trend_games
        prediction += trend * self.config.trend_weight

        logger.debug(f"LSTM raw={raw:.2f}x trend={trend:.3f} -> {prediction:.2f}x")
        return PredictionResult(float(prediction), confidence, {"raw": raw, "trend": trend})
