"""Tests for loading history files."""

import json
import subprocess
import sys

import pytest

from crashpred.data.loader import load_history


class TestLoadHistory:
    """Tests for load_history."""

    def test_csv(self, tmp_path) -> None:
        path = tmp_path / "history.csv"
        path.write_text("gameNumber,multiplier\n1,1.5\n2,2.25\n3,10.0\n")
        history = load_history(path)
        assert len(history) == 3
        assert list(history.multipliers) == [1.5, 2.25, 10.0]

    def test_json(self, tmp_path) -> None:
        path = tmp_path / "history.json"
        path.write_text(
            json.dumps(
                [{"gameNumber": 1, "multiplier": 1.2}, {"gameNumber": 2, "multiplier": 3.4}]
            )
        )
        history = load_history(path)
        assert history.last.multiplier == 3.4

    def test_snake_case_columns(self, tmp_path) -> None:
        path = tmp_path / "history.csv"
        path.write_text("game_number,multiplier\n1,1.5\n")
        assert load_history(path).at(0).game_number == 1

    def test_sorted_by_game_number(self, tmp_path) -> None:
        path = tmp_path / "history.csv"
        path.write_text("gameNumber,multiplier\n3,3.0\n1,1.0\n2,2.0\n")
        history = load_history(path)
        assert [r.game_number for r in history] == [1, 2, 3]

    def test_drops_incomplete_rows(self, tmp_path) -> None:
        path = tmp_path / "history.csv"
        path.write_text("gameNumber,multiplier\n1,1.5\n2,\n3,2.0\n")
        assert len(load_history(path)) == 2

    def test_missing_column(self, tmp_path) -> None:
        path = tmp_path / "history.csv"
        path.write_text("gameNumber,value\n1,1.5\n")
        with pytest.raises(ValueError, match="missing columns"):
            load_history(path)

    def test_unsupported_extension(self, tmp_path) -> None:
        path = tmp_path / "history.txt"
        path.write_text("1,1.5\n")
        with pytest.raises(ValueError, match="Unsupported"):
            load_history(path)


class TestImportBoundary:
    """The prediction core stays free of the file-loading stack."""

    def test_core_import_skips_pandas(self) -> None:
        code = "import sys, crashpred; print('pandas' in sys.modules)"
        result = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, check=True
        )
        assert result.stdout.strip() == "False"
