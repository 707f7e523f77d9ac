"""Hybrid Transformer Strategy.

Composed forward pass over the last 100 games:

1. Z-score normalization
2. Bidirectional LSTM (16 units per direction)
3. 1-D convolution (kernel 3, 8 filters) with ReLU and max-pooling
4. Single-query attention (dim 32, 4 heads)
5. Mean read-out, denormalized, plus 0.2x the gap between the last-10
   mean and the window mean

Weights are drawn fresh for every call and never trained. Confidence
reflects how stable the last 10 games were.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.statistics import describe
from ...network import HybridSequenceNetwork, z_normalize
from ..base_strategy import RandomizedConfig, RandomizedStrategy
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HybridTransformerConfig(RandomizedConfig):
    """Configuration for the hybrid network.

    Args:
        window: Sequence length
        min_history: Games needed before the network runs
        hidden_size: LSTM units per direction
        kernel_size: Convolution width
        filters: Convolution filters
        attention_dim: Attention width
        attention_heads: Attention heads
        recent_games: Games for trend and stability
        trend_weight: Weight of the recent-vs-window trend
    """

    window: int | None = 100
    min_history: int = 20
    max_prediction: float = 50.0
    fallback_confidence: float = 25.0
    hidden_size: int = 16
    kernel_size: int = 3
    filters: int = 8
    attention_dim: int = 32
    attention_heads: int = 4
    recent_games: int = 10
    trend_weight: float = 0.2


@register_strategy("hybrid_transformer")
class HybridTransformerStrategy(RandomizedStrategy):
    """BiLSTM -> CNN -> attention forward pass with a trend adjustment."""

    config: HybridTransformerConfig
    config_class = HybridTransformerConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        normalized, mean, sd = z_normalize(values)

        network = HybridSequenceNetwork(
            self._generator(),
            hidden_size=self.config.hidden_size,
            kernel_size=self.config.kernel_size,
            filters=self.config.filters,
            attention_dim=self.config.attention_dim,
            attention_heads=self.config.attention_heads,
        )
        output = network.forward(normalized)

        recent = describe(values[-self.config.recent_games :])
        trend = recent.mean - mean
        prediction = output * sd + mean + trend * self.config.trend_weight

        stability = 1 / (1 + recent.std_dev)
        confidence = float(np.clip(50 + stability * 30, 40, 80))

        logger.debug(
            f"Hybrid output={output:.4f} trend={trend:.3f} stability={stability:.2f} "
            f"-> {prediction:.2f}x"
        )
        return PredictionResult(float(prediction), confidence, {"network_output": output})
