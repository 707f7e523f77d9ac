"""Tests for state tables and classification."""

import math

import pytest

from crashpred.indicators import RANGE_STATES, REGIME_STATES, State, StateTable, classify


class TestClassify:
    """Tests for half-open interval classification."""

    def test_regime_interior(self) -> None:
        assert classify(1.2, REGIME_STATES).name == "LOW"
        assert classify(1.8, REGIME_STATES).name == "MED"
        assert classify(3.0, REGIME_STATES).name == "HIGH"
        assert classify(50.0, REGIME_STATES).name == "EXTREME"

    def test_boundary_goes_to_upper_state(self) -> None:
        assert classify(1.5, REGIME_STATES).name == "MED"
        assert classify(2.5, REGIME_STATES).name == "HIGH"
        assert classify(5.0, REGIME_STATES).name == "EXTREME"
        assert classify(10.0, RANGE_STATES).name == "10.00+"

    def test_catch_all_last_state(self) -> None:
        assert classify(math.inf, REGIME_STATES).name == "EXTREME"
        assert classify(1e9, RANGE_STATES).name == "10.00+"

    def test_below_floor_falls_to_last(self) -> None:
        assert classify(0.5, REGIME_STATES).name == "EXTREME"

    def test_method_matches_function(self) -> None:
        assert RANGE_STATES.classify(2.0) == classify(2.0, RANGE_STATES)

    def test_midpoints(self) -> None:
        assert [s.midpoint for s in REGIME_STATES] == [1.25, 2.0, 3.75, 10.0]
        assert [s.midpoint for s in RANGE_STATES] == [1.25, 1.75, 2.5, 4.0, 7.5, 15.0]


class TestStateTable:
    """Tests for StateTable validation and lookup."""

    def test_names(self) -> None:
        assert REGIME_STATES.names == ["LOW", "MED", "HIGH", "EXTREME"]
        assert len(RANGE_STATES) == 6

    def test_by_name(self) -> None:
        assert REGIME_STATES.by_name("HIGH").min == 2.5
        with pytest.raises(KeyError):
            REGIME_STATES.by_name("NONE")

    def test_state_contains(self) -> None:
        low = REGIME_STATES.by_name("LOW")
        assert low.contains(1.0)
        assert not low.contains(1.5)

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            StateTable([])

    def test_must_start_at_one(self) -> None:
        with pytest.raises(ValueError):
            StateTable([State("A", 1.5, math.inf, 2.0)])

    def test_gap_rejected(self) -> None:
        with pytest.raises(ValueError):
            StateTable([State("A", 1.0, 2.0, 1.5), State("B", 2.5, math.inf, 3.0)])

    def test_empty_interval_rejected(self) -> None:
        with pytest.raises(ValueError):
            StateTable([State("A", 1.0, 1.0, 1.0)])

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValueError):
            StateTable([State("A", 1.0, 2.0, 1.5), State("A", 2.0, math.inf, 3.0)])
