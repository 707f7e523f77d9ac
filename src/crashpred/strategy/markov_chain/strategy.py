"""Markov Chain Strategy.

First-order chain over multiplier ranges. Transitions between consecutive
games are counted over the whole history, the row of the last game's state
is read, and the most probable next state's midpoint is predicted.
Confidence is how dominant that state is in its row (capped at 95).
"""

import logging
from dataclasses import dataclass

from ...data import History
from ...indicators.markov import RowFallback, build_transitions, predict_next_state
from ...indicators.states import RANGE_STATES, StateTable, classify
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkovChainConfig(StrategyConfig):
    """Configuration for the Markov chain.

    Args:
        window: Games used for transition counts (None = full history)
        states: State table to classify into
        transition_window: Count only the trailing N transitions (None = all)
        fallback: Row policy for states never seen as a source
    """

    window: int | None = None
    min_history: int = 2
    states: StateTable = RANGE_STATES
    transition_window: int | None = None
    fallback: RowFallback = RowFallback.UNIFORM


@register_strategy("markov_chain")
class MarkovChainStrategy(BaseStrategy):
    """Predict the midpoint of the most likely next state."""

    config: MarkovChainConfig
    config_class = MarkovChainConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        matrix = build_transitions(
            values,
            self.config.states,
            window=self.config.transition_window,
            fallback=self.config.fallback,
        )
        current = classify(window.last.multiplier, self.config.states)
        next_state = predict_next_state(matrix, current)

        logger.debug(
            f"Last state={current.name} predicted={next_state.state.name} "
            f"p={next_state.probability:.3f} from {matrix.total_transitions} transitions"
        )
        return PredictionResult(
            next_state.state.midpoint,
            next_state.confidence,
            {
                "current_state": current.name,
                "predicted_state": next_state.state.name,
                "probability": next_state.probability,
            },
        )
