"""Tests for weighted and exponential averages."""

import numpy as np
import pytest

from crashpred.indicators import (
    adaptive_alpha,
    ema,
    exp_weighted_average,
    linear_wma,
    truncate_to_cents,
)


class TestLinearWma:
    """Tests for the linearly weighted average."""

    def test_latest_weighted_most(self) -> None:
        assert linear_wma(np.array([2.0, 3.0, 4.0])) == pytest.approx(20 / 6)

    def test_single(self) -> None:
        assert linear_wma(np.array([7.0])) == 7.0

    def test_empty(self) -> None:
        assert linear_wma(np.array([])) == 0.0


class TestExpWeightedAverage:
    """Tests for exp(i / n) weighting."""

    def test_flat(self) -> None:
        assert exp_weighted_average(np.array([3.0, 3.0, 3.0])) == pytest.approx(3.0)

    def test_leans_recent(self) -> None:
        result = exp_weighted_average(np.array([1.0, 3.0]))
        assert 2.0 < result < 3.0


class TestEma:
    """Tests for the exponential moving average."""

    def test_seeded_with_first_value(self) -> None:
        assert ema(np.array([1.0, 2.0]), 0.5) == 1.5

    def test_empty(self) -> None:
        assert ema(np.array([]), 0.3) == 0.0


class TestAdaptiveAlpha:
    """Tests for the volatility-driven smoothing factor."""

    def test_calm_window_uses_floor(self) -> None:
        assert adaptive_alpha(np.array([1.0, 1.0, 1.0])) == 0.1

    def test_volatile_window_uses_ceiling(self) -> None:
        assert adaptive_alpha(np.array([1.0, 5.0, 1.0])) == 0.3

    def test_between(self) -> None:
        assert adaptive_alpha(np.array([1.0, 1.4])) == pytest.approx(0.2)


class TestTruncateToCents:
    """Tests for display truncation."""

    def test_rounds_down(self) -> None:
        assert truncate_to_cents(1.999) == 1.99
        assert truncate_to_cents(2.349) == 2.34

    def test_exact(self) -> None:
        assert truncate_to_cents(2.5) == 2.5
