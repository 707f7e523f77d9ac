"""Load recorded game history from disk for command line use."""

from pathlib import Path

import pandas as pd

from .history import History
from .record import Record

_COLUMN_ALIASES = {
    "game_number": "gameNumber",
    "game": "gameNumber",
    "mult": "multiplier",
}


def load_history(path: Path | str) -> History:
    """Load a history file (CSV or JSON) into a History.

    Rows are sorted by game number so the result is chronological even if
    the file is not.

    Args:
        path: File with gameNumber and multiplier columns

    Returns:
        History of all rows in the file

    Raises:
        ValueError: If the extension is unsupported or columns are missing
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix == ".json":
        df = pd.read_json(path)
    else:
        raise ValueError(f"Unsupported history file type: {path.suffix} (use .csv or .json)")

    df = df.rename(columns=_COLUMN_ALIASES)
    missing = {"gameNumber", "multiplier"} - set(df.columns)
    if missing:
        raise ValueError(f"History file {path} missing columns: {sorted(missing)}")

    df = df.dropna(subset=["gameNumber", "multiplier"]).sort_values("gameNumber", kind="stable")
    return History(
        Record(game_number=int(g), multiplier=float(m))
        for g, m in zip(df["gameNumber"], df["multiplier"])
    )
