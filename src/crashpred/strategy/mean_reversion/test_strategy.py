"""Tests for the mean reversion strategy.

Run with:
  pytest src/crashpred/strategy/mean_reversion/test_strategy.py -v
"""

import numpy as np
import pytest

from crashpred.data import History
from crashpred.strategy.mean_reversion import MeanReversionStrategy


class TestMeanReversionStrategy:
    """Tests for MeanReversionStrategy."""

    def test_strong_reversion(self) -> None:
        # Mean 2.0, sd 1.0, last 5.0 -> z = 3
        history = History.from_multipliers([5 / 3] * 9 + [5.0])
        result = MeanReversionStrategy().predict(history)
        assert result.prediction == pytest.approx(3.2)
        assert result.confidence == pytest.approx(80.0)
        assert result.details["z_score"] == pytest.approx(3.0)

    def test_moderate_reversion(self) -> None:
        history = History.from_multipliers([1.0, 3.0] * 5)
        result = MeanReversionStrategy().predict(history)
        assert result.prediction == pytest.approx(2.7)
        assert result.confidence == 55.0

    def test_near_mean(self) -> None:
        values = [1.0, 3.0] * 5 + [2.0]
        result = MeanReversionStrategy().predict(History.from_multipliers(values))
        assert result.prediction == pytest.approx(np.mean(values))
        assert result.confidence == 50.0

    def test_capped_at_two_deviations(self) -> None:
        values = np.array([1.0] * 99 + [100.0])
        result = MeanReversionStrategy().predict(History.from_multipliers(values))
        assert result.prediction == pytest.approx(values.mean() + 2 * values.std())
        assert result.confidence == 80.0

    def test_low_outlier_pulls_up(self) -> None:
        history = History.from_multipliers([3.0] * 20 + [1.0])
        result = MeanReversionStrategy().predict(history)
        assert result.prediction > 1.0
