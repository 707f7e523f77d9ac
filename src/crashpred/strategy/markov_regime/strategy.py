"""Markov Regime Strategy.

Four coarse regimes (LOW, MED, HIGH, EXTREME) with transitions counted over
the trailing 10,000 games. The predicted regime's midpoint is blended with
the recent average (70/30) so the output tracks the current level.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.markov import RowFallback, build_transitions, predict_next_state
from ...indicators.states import REGIME_STATES, StateTable, classify
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkovRegimeConfig(StrategyConfig):
    """Configuration for the regime chain.

    Args:
        window: Trailing games considered (transitions = window - 1)
        states: Regime table
        midpoint_weight: Weight of the predicted regime midpoint
        recent_games: Games in the recent average
    """

    window: int | None = 10001
    min_history: int = 2
    states: StateTable = REGIME_STATES
    fallback: RowFallback = RowFallback.UNIFORM
    midpoint_weight: float = 0.7
    recent_games: int = 20


@register_strategy("markov_regime")
class MarkovRegimeStrategy(BaseStrategy):
    """Regime midpoint blended with the recent average."""

    config: MarkovRegimeConfig
    config_class = MarkovRegimeConfig

    def _predict(self, window: History) -> PredictionResult:
        matrix = build_transitions(
            window.multipliers, self.config.states, fallback=self.config.fallback
        )
        current = classify(window.last.multiplier, self.config.states)
        next_state = predict_next_state(matrix, current)

        recent = float(np.mean(window.last_n(self.config.recent_games).multipliers))
        weight = self.config.midpoint_weight
        prediction = next_state.state.midpoint * weight + recent * (1 - weight)

        logger.debug(
            f"Regime {current.name} -> {next_state.state.name}, recent={recent:.2f}x "
            f"-> {prediction:.2f}x"
        )
        return PredictionResult(
            prediction,
            next_state.confidence,
            {"current_state": current.name, "predicted_state": next_state.state.name},
        )
