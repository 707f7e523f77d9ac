"""Pattern Recognition Strategy.

Finds earlier stretches of history that look like the last five games and
predicts what followed them, weighted by similarity. More matches mean more
confidence. Without a match it falls back to the recent average.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.pattern import find_matches, weighted_next_value
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternRecognitionConfig(StrategyConfig):
    """Configuration for pattern matching.

    Args:
        pattern_length: Games in the pattern
        search_depth: How far back candidate patterns may start
        max_distance: Mean relative distance accepted as a match
        base_confidence: Confidence before per-match steps are added
        confidence_step: Confidence gained per match
        max_confidence: Confidence cap for pattern predictions
        no_match_confidence: Confidence of the recent-average fallback

    The window defaults to search_depth + pattern_length + 1 games, the most
    the scan can reach.
    """

    window: int | None = None
    min_history: int = 7
    pattern_length: int = 5
    search_depth: int = 500
    max_distance: float = 0.3
    base_confidence: float = 40.0
    confidence_step: float = 3.0
    max_confidence: float = 70.0
    no_match_confidence: float = 35.0
    fallback_confidence: float = 35.0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.pattern_length < 1:
            raise ValueError(f"pattern_length must be positive, got {self.pattern_length}")
        if self.search_depth < 0:
            raise ValueError(f"search_depth must be non-negative, got {self.search_depth}")
        needed = self.search_depth + self.pattern_length + 1
        if self.window is None:
            object.__setattr__(self, "window", needed)
        elif self.window < needed:
            raise ValueError(
                f"window must cover search_depth + pattern_length + 1 = {needed}, got {self.window}"
            )


@register_strategy("pattern_recognition")
class PatternRecognitionStrategy(BaseStrategy):
    """Similarity-weighted nearest-neighbour pattern forecast."""

    config: PatternRecognitionConfig
    config_class = PatternRecognitionConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        matches = find_matches(
            values,
            pattern_length=self.config.pattern_length,
            search_depth=self.config.search_depth,
            max_distance=self.config.max_distance,
        )
        prediction = weighted_next_value(matches)

        if prediction is None:
            prediction = float(np.mean(values[-self.config.fallback_window :]))
            confidence = self.config.no_match_confidence
        else:
            confidence = min(
                self.config.max_confidence,
                self.config.base_confidence + len(matches) * self.config.confidence_step,
            )

        logger.debug(f"{len(matches)} pattern matches -> {prediction:.2f}x")
        return PredictionResult(prediction, confidence, {"matches": len(matches)})
