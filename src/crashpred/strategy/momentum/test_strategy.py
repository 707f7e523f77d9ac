"""Tests for the momentum strategy.

Run with:
  pytest src/crashpred/strategy/momentum/test_strategy.py -v
"""

import pytest

from crashpred.data import History
from crashpred.strategy.momentum import MomentumStrategy


class TestMomentumStrategy:
    """Tests for MomentumStrategy."""

    def test_strong_trend_continues(self) -> None:
        result = MomentumStrategy().predict(History.from_multipliers([1.0, 2.0, 3.0, 4.0, 5.0]))
        assert result.prediction == pytest.approx(5.4)
        assert result.confidence == 75.0

    def test_weak_trend_splits_difference(self) -> None:
        result = MomentumStrategy().predict(History.from_multipliers([2.0, 3.0] * 3))
        assert result.prediction == pytest.approx(2.75)
        assert result.confidence == 45.0
        assert result.details["trend_strength"] == pytest.approx(0.2)

    def test_capped_at_twice_average(self) -> None:
        result = MomentumStrategy().predict(History.from_multipliers([1.0, 1.0, 1.0, 1.0, 10.0]))
        assert result.prediction == pytest.approx(5.6)

    def test_window(self) -> None:
        history = History.from_multipliers([5.0, 4.0, 3.0, 2.0] * 10 + [2.0] * 30)
        result = MomentumStrategy().predict(history)
        assert result.details["score"] == 0.0
        assert result.prediction == pytest.approx(2.0)
