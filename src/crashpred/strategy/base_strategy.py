"""Base strategy interface."""

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..core.telemetry import PredictionObserver, notify
from ..data import History
from .types import (
    GLOBAL_FLOOR,
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    NEUTRAL_MULTIPLIER,
    PredictionResult,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyConfig:
    """Base configuration for strategies.

    Subclass to add strategy-specific parameters and to override defaults.

    Args:
        window: Trailing games handed to the algorithm (None = full history)
        min_history: Fewer games than this uses the fallback average
        max_prediction: Upper clamp for the returned prediction
        fallback_window: Games averaged by the fallback
        fallback_confidence: Confidence reported by the fallback

    Example:
        @dataclass(frozen=True)
        class MyConfig(StrategyConfig):
            window: int | None = 30
            threshold: float = 0.6
    """

    window: int | None = 100
    min_history: int = 1
    max_prediction: float = 1000.0
    fallback_window: int = 20
    fallback_confidence: float = 30.0

    def __post_init__(self) -> None:
        if self.window is not None and self.window < 1:
            raise ValueError(f"window must be positive or None, got {self.window}")
        if self.min_history < 1:
            raise ValueError(f"min_history must be at least 1, got {self.min_history}")
        if self.max_prediction < GLOBAL_FLOOR:
            raise ValueError(f"max_prediction must be >= {GLOBAL_FLOOR}, got {self.max_prediction}")
        if self.fallback_window < 1:
            raise ValueError(f"fallback_window must be positive, got {self.fallback_window}")


class BaseStrategy(ABC):
    """Abstract base class for prediction strategies.

    Subclasses implement ``_predict`` over a window that is guaranteed to hold
    at least ``config.min_history`` games. ``predict`` handles input coercion,
    the insufficient-history fallback, clamping and observer notification, so
    it returns a well-formed PredictionResult for any history, including an
    empty one.

    Attributes:
        config: Strategy configuration
        name: Strategy name (custom or registry name)
        observer: Optional telemetry sink called after each prediction

    Example:
        class LastValueStrategy(BaseStrategy):
            def _predict(self, window: History) -> PredictionResult:
                return PredictionResult(window.last.multiplier, 40.0)
    """

    default_name = ""
    config_class: type[StrategyConfig] = StrategyConfig

    def __init__(
        self,
        config: StrategyConfig | None = None,
        name: str | None = None,
        observer: PredictionObserver | None = None,
    ):
        """Initialize strategy with configuration.

        Args:
            config: Strategy configuration (defaults to the strategy's config class)
            name: Optional friendly name (defaults to registry or class name)
            observer: Optional callable receiving (name, result)
        """
        self.config = config if config is not None else self.default_config()
        self._name = name
        self.observer = observer

    @classmethod
    def default_config(cls) -> StrategyConfig:
        return cls.config_class()

    @property
    def name(self) -> str:
        """Strategy name. Returns custom name if set, else registry or class name."""
        return self._name or self.default_name or self.__class__.__name__

    def predict(
        self,
        history: History | Sequence,
        total_games: int | None = None,
    ) -> PredictionResult:
        """Predict the next multiplier.

        Args:
            history: History, Records, dicts with gameNumber/multiplier, or a
                flat [game, mult, ...] buffer
            total_games: Record count; required for a flat buffer

        Returns:
            PredictionResult with 1.0 <= prediction <= max_prediction and
            0 <= confidence <= 100

        Raises:
            ValueError: If total_games does not match the history
        """
        history = History.coerce(history, total_games)

        if len(history) == 0:
            result = PredictionResult(NEUTRAL_MULTIPLIER, MIN_CONFIDENCE, {"reason": "empty"})
        elif len(history) < self.config.min_history:
            result = self._fallback(history, "insufficient_history")
        else:
            window = history if self.config.window is None else history.last_n(self.config.window)
            result = self._predict(window)
            if not (math.isfinite(result.prediction) and math.isfinite(result.confidence)):
                logger.warning(f"{self.name} produced a non-finite result, using fallback")
                result = self._fallback(history, "non_finite")

        result = self._clamp(result)
        logger.debug(
            f"{self.name}: prediction={result.prediction:.2f}x "
            f"confidence={result.confidence:.1f} ({len(history)} games)"
        )
        notify(self.observer, self.name, result)
        return result

    @abstractmethod
    def _predict(self, window: History) -> PredictionResult:
        """Run the algorithm over a window of at least ``min_history`` games."""
        ...

    def _fallback(self, history: History, reason: str) -> PredictionResult:
        """Simple trailing average at the configured low confidence."""
        values = history.last_n(self.config.fallback_window).multipliers
        return PredictionResult(
            float(np.mean(values)),
            self.config.fallback_confidence,
            {"reason": reason},
        )

    def _clamp(self, result: PredictionResult) -> PredictionResult:
        # Non-finite values can still arrive here from a history holding NaN
        prediction = result.prediction if math.isfinite(result.prediction) else NEUTRAL_MULTIPLIER
        confidence = result.confidence if math.isfinite(result.confidence) else MIN_CONFIDENCE
        prediction = min(max(prediction, GLOBAL_FLOOR), self.config.max_prediction)
        confidence = min(max(confidence, MIN_CONFIDENCE), MAX_CONFIDENCE)
        if prediction == result.prediction and confidence == result.confidence:
            return result
        return PredictionResult(float(prediction), float(confidence), result.details)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


@dataclass(frozen=True)
class RandomizedConfig(StrategyConfig):
    """Configuration for strategies that draw fresh random weights.

    Args:
        seed: Seed for a fresh generator per call (None = OS entropy)
    """

    seed: int | None = None


class RandomizedStrategy(BaseStrategy):
    """Strategy whose prediction depends on freshly drawn random weights.

    Pass ``rng`` to share a generator across calls (each call advances it),
    or set ``config.seed`` so every call starts from the same weights.
    """

    config: RandomizedConfig
    config_class = RandomizedConfig

    def __init__(
        self,
        config: RandomizedConfig | None = None,
        name: str | None = None,
        observer: PredictionObserver | None = None,
        rng: np.random.Generator | None = None,
    ):
        super().__init__(config, name, observer)
        self._rng = rng

    def _generator(self) -> np.random.Generator:
        """Generator for this call's weights."""
        if self._rng is not None:
            return self._rng
        return np.random.default_rng(self.config.seed)
