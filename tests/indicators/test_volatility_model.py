"""Tests for GARCH conditional variance and EVT tail estimates."""

import numpy as np
import pytest

from crashpred.indicators import (
    VolatilityBand,
    classify_volatility,
    evt_tail,
    garch_variance,
    volatility_ratio,
)


class TestGarchVariance:
    """Tests for the GARCH(1,1) recursion."""

    def test_flat_window(self) -> None:
        result = garch_variance(np.array([2.0, 2.0, 2.0]))
        # Residuals are zero so only omega and beta act: 0.05, 0.0925, 0.128625
        assert result.conditional_variance == pytest.approx(0.128625)
        assert result.long_run_mean == 2.0

    def test_steps_limit_recursion(self) -> None:
        values = np.array([1.0, 3.0] * 20)
        short = garch_variance(values, steps=1)
        # Seed is the mean squared residual (1.0), then one step
        assert short.conditional_variance == pytest.approx(0.05 + 0.1 * 1.0 + 0.85 * 1.0)

    def test_conditional_std(self) -> None:
        result = garch_variance(np.array([1.0, 3.0, 1.0, 3.0]))
        assert result.conditional_std == pytest.approx(np.sqrt(result.conditional_variance))

    def test_empty(self) -> None:
        result = garch_variance(np.array([]))
        assert result.conditional_variance == 0.0
        assert result.conditional_std == 0.0


class TestEvtTail:
    """Tests for the tail estimate above mean + 2 sd."""

    def test_single_outlier(self) -> None:
        values = np.array([1.0] * 19 + [21.0])
        tail = evt_tail(values)
        assert tail.threshold == pytest.approx(2.0 + 2 * np.sqrt(19.0))
        assert tail.exceedances == 1
        assert tail.tail_probability == pytest.approx(0.05)
        assert tail.avg_excess == pytest.approx(21.0 - tail.threshold)
        assert 0.0 < tail.shape < 0.5

    def test_no_exceedances(self) -> None:
        tail = evt_tail(np.array([2.0, 2.0, 2.0]))
        assert tail.exceedances == 0
        assert tail.avg_excess == 0.0
        assert tail.shape == 0.0

    def test_empty(self) -> None:
        assert evt_tail(np.array([])).tail_probability == 0.0


class TestVolatilityBands:
    """Tests for the recent/conditional volatility ratio."""

    def test_ratio(self) -> None:
        assert volatility_ratio(3.0, 2.0) == 1.5

    def test_ratio_zero_std(self) -> None:
        assert volatility_ratio(1.0, 0.0) == 0.0

    def test_bands(self) -> None:
        assert classify_volatility(1.6) is VolatilityBand.HIGH
        assert classify_volatility(1.5) is VolatilityBand.MODERATE
        assert classify_volatility(1.2) is VolatilityBand.MODERATE
        assert classify_volatility(1.0) is VolatilityBand.LOW
