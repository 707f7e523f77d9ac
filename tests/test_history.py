"""Tests for game records and history access."""

import numpy as np
import pytest

from crashpred.data import History, IndexOutOfRangeError, Record, at, last_n


def make_history(multipliers: list[float], start: int = 1) -> History:
    """Create a history from bare multipliers."""
    return History.from_multipliers(multipliers, start=start)


class TestRecord:
    """Tests for Record conversion."""

    def test_to_dict_uses_host_names(self) -> None:
        record = Record(game_number=7, multiplier=1.85)
        assert record.to_dict() == {"gameNumber": 7, "multiplier": 1.85}

    def test_from_dict_host_names(self) -> None:
        record = Record.from_dict({"gameNumber": 3, "multiplier": "2.5"})
        assert record == Record(3, 2.5)

    def test_from_dict_snake_case(self) -> None:
        record = Record.from_dict({"game_number": 4, "multiplier": 1.1})
        assert record.game_number == 4

    def test_from_dict_missing_field(self) -> None:
        with pytest.raises(ValueError):
            Record.from_dict({"multiplier": 1.1})


class TestHistory:
    """Tests for History construction and accessors."""

    def test_from_multipliers_numbers_games(self) -> None:
        history = make_history([1.5, 2.0], start=10)
        assert [r.game_number for r in history] == [10, 11]
        assert history.total_games == 2

    def test_multipliers_array_read_only(self) -> None:
        history = make_history([1.5, 2.0, 3.0])
        values = history.multipliers
        np.testing.assert_allclose(values, [1.5, 2.0, 3.0])
        with pytest.raises(ValueError):
            values[0] = 9.0

    def test_last_n_returns_trailing_records(self) -> None:
        history = make_history([1.0, 2.0, 3.0, 4.0])
        window = history.last_n(2)
        assert isinstance(window, History)
        assert list(window.multipliers) == [3.0, 4.0]

    def test_last_n_larger_than_history(self) -> None:
        history = make_history([1.0, 2.0])
        assert history.last_n(10) == history

    def test_last_n_non_positive_is_empty(self) -> None:
        history = make_history([1.0, 2.0])
        assert len(history.last_n(0)) == 0
        assert len(history.last_n(-3)) == 0

    def test_at_in_range(self) -> None:
        history = make_history([1.2, 3.4])
        assert history.at(1).multiplier == 3.4
        assert at(history, 0).multiplier == 1.2

    def test_at_out_of_range(self) -> None:
        history = make_history([1.2, 3.4])
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            history.at(2)
        assert exc_info.value.index == 2
        assert exc_info.value.length == 2
        with pytest.raises(IndexError):
            history.at(-1)

    def test_last_on_empty_raises(self) -> None:
        with pytest.raises(IndexOutOfRangeError):
            History().last

    def test_slice_returns_history(self) -> None:
        history = make_history([1.0, 2.0, 3.0])
        assert isinstance(history[1:], History)
        assert len(history[1:]) == 2

    def test_module_last_n(self) -> None:
        history = make_history([1.0, 2.0, 3.0])
        assert list(last_n(history, 1).multipliers) == [3.0]

    def test_repr(self) -> None:
        assert repr(make_history([1.0])) == "History(1 games)"


class TestHistoryCoerce:
    """Tests for accepting the host encodings."""

    def test_flat_buffer(self) -> None:
        history = History.coerce([1, 1.5, 2, 2.25, 3, 4.0], total_games=3)
        assert [r.game_number for r in history] == [1, 2, 3]
        assert list(history.multipliers) == [1.5, 2.25, 4.0]

    def test_flat_buffer_ignores_extra_values(self) -> None:
        history = History.coerce([1, 1.5, 2, 2.25, 99, 99], total_games=2)
        assert len(history) == 2

    def test_flat_buffer_too_short(self) -> None:
        with pytest.raises(ValueError):
            History.coerce([1, 1.5, 2], total_games=2)

    def test_flat_buffer_needs_total_games(self) -> None:
        with pytest.raises(ValueError):
            History.coerce([1, 1.5])

    def test_numpy_buffer(self) -> None:
        history = History.coerce(np.array([5.0, 1.9]), total_games=1)
        assert history.at(0) == Record(5, 1.9)

    def test_dicts(self) -> None:
        history = History.coerce([{"gameNumber": 1, "multiplier": 2.0}])
        assert history.at(0) == Record(1, 2.0)

    def test_records(self) -> None:
        history = History.coerce([Record(1, 2.0), Record(2, 3.0)], total_games=2)
        assert len(history) == 2

    def test_total_games_mismatch(self) -> None:
        with pytest.raises(ValueError):
            History.coerce([Record(1, 2.0)], total_games=2)

    def test_history_passes_through(self) -> None:
        history = make_history([1.0, 2.0])
        assert History.coerce(history) is history

    def test_empty_list(self) -> None:
        assert len(History.coerce([])) == 0
