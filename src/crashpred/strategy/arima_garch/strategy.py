"""ARIMA-GARCH Inspired Strategy.

Autoregressive mean forecast adjusted for volatility clustering:

1. AR(5) with exponentially decaying weights exp(-0.3 * lag), blended
   70/30 with the window mean.
2. GARCH(1,1) conditional standard deviation of residuals from the mean.
3. Recent volatility (mean absolute change over the last 10 steps) over
   the conditional sd selects how much to trust the AR forecast.
4. The forecast is kept within mean +/- 1.5 conditional sd.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ...data import History
from ...indicators.momentum import mean_abs_change
from ...indicators.volatility import (
    VolatilityBand,
    classify_volatility,
    garch_variance,
    volatility_ratio,
)
from ..base_strategy import BaseStrategy, StrategyConfig
from ..registry import register_strategy
from ..types import PredictionResult

logger = logging.getLogger(__name__)

# (weight on AR forecast, confidence) per volatility band
_BAND_BLEND = {
    VolatilityBand.HIGH: (0.4, 35.0),
    VolatilityBand.MODERATE: (0.6, 50.0),
    VolatilityBand.LOW: (0.8, 65.0),
}


def ar_forecast(values: np.ndarray, lags: int = 5, decay: float = 0.3) -> float:
    """Autoregressive forecast with weights exp(-decay * lag), latest first.

    Weights are normalized over all ``lags`` even when fewer values exist.
    """
    weights = np.exp(-decay * np.arange(lags))
    weights /= weights.sum()
    recent = np.asarray(values, dtype=float)[::-1][:lags]
    return float(np.sum(recent * weights[: len(recent)]))


@dataclass(frozen=True)
class ArimaGarchConfig(StrategyConfig):
    """Configuration for the ARIMA-GARCH strategy.

    Args:
        window: Games analysed
        ar_lags: Autoregressive terms
        ar_decay: Exponential decay of AR weights per lag
        ar_weight: Weight of the AR forecast against the mean
        volatility_steps: Consecutive changes in the recent volatility
        band_sd: Clamp within mean +/- band_sd conditional sd
    """

    window: int | None = 150
    min_history: int = 2
    ar_lags: int = 5
    ar_decay: float = 0.3
    ar_weight: float = 0.7
    volatility_steps: int = 10
    band_sd: float = 1.5


@register_strategy("arima_garch")
class ArimaGarchStrategy(BaseStrategy):
    """Autoregressive forecast tempered by GARCH volatility clustering."""

    config: ArimaGarchConfig
    config_class = ArimaGarchConfig

    def _predict(self, window: History) -> PredictionResult:
        values = window.multipliers
        mean = float(np.mean(values))

        ar = ar_forecast(values, self.config.ar_lags, self.config.ar_decay)
        mean_forecast = ar * self.config.ar_weight + mean * (1 - self.config.ar_weight)

        garch = garch_variance(values)
        cond_std = garch.conditional_std

        recent_volatility = mean_abs_change(values[-(self.config.volatility_steps + 1) :])
        ratio = volatility_ratio(recent_volatility, cond_std)
        band = classify_volatility(ratio)
        forecast_weight, confidence = _BAND_BLEND[band]

        prediction = mean_forecast * forecast_weight + mean * (1 - forecast_weight)
        lower = mean - self.config.band_sd * cond_std
        upper = mean + self.config.band_sd * cond_std
        prediction = min(max(prediction, lower), upper)

        logger.debug(
            f"Mean={mean:.2f}x condVar={garch.conditional_variance:.3f} "
            f"volRatio={ratio:.2f} ({band.value}) -> {prediction:.2f}x"
        )
        return PredictionResult(
            prediction,
            confidence,
            {
                "conditional_variance": garch.conditional_variance,
                "volatility_ratio": ratio,
                "band": band.value,
            },
        )
