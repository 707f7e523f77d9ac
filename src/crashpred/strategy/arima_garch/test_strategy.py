"""Tests for the ARIMA-GARCH strategy.

Run with:
  pytest src/crashpred/strategy/arima_garch/test_strategy.py -v
"""

import numpy as np
import pytest

from crashpred.data import History
from crashpred.strategy.arima_garch import ArimaGarchStrategy
from crashpred.strategy.arima_garch.strategy import ar_forecast


class TestArForecast:
    """Tests for the decaying-weight autoregressive forecast."""

    def test_flat(self) -> None:
        assert ar_forecast(np.array([2.0] * 10)) == pytest.approx(2.0)

    def test_latest_weighted_most(self) -> None:
        assert ar_forecast(np.array([1.0] * 5 + [10.0])) > ar_forecast(np.array([10.0] + [1.0] * 5))

    def test_short_history_keeps_full_normalization(self) -> None:
        weights = np.exp(-0.3 * np.arange(5))
        assert ar_forecast(np.array([3.0])) == pytest.approx(3.0 / weights.sum())


class TestArimaGarchStrategy:
    """Tests for ArimaGarchStrategy."""

    def test_calm_history(self) -> None:
        result = ArimaGarchStrategy().predict(History.from_multipliers([2.0] * 30))
        assert result.prediction == pytest.approx(2.0)
        assert result.confidence == 65.0
        assert result.details["band"] == "low"

    def test_volatile_tail(self) -> None:
        values = [2.0] * 140 + [1.0, 10.0] * 5 + [1.0]
        result = ArimaGarchStrategy().predict(History.from_multipliers(values))
        assert result.details["band"] == "high"
        assert result.confidence == 35.0

    def test_within_conditional_band(self) -> None:
        rng = np.random.default_rng(5)
        values = 1.0 + rng.exponential(1.0, 150)
        result = ArimaGarchStrategy().predict(History.from_multipliers(values))
        mean = values.mean()
        cond_std = np.sqrt(result.details["conditional_variance"])
        assert mean - 1.5 * cond_std - 1e-9 <= result.prediction <= mean + 1.5 * cond_std + 1e-9
