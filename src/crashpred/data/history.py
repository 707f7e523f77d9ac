"""Read-only access to the observed game history.

The host owns the live sequence and appends to it; everything here only
reads. Windows are plain ``History`` objects holding the trailing records.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import Union, overload

import numpy as np

from .record import Record


class IndexOutOfRangeError(IndexError):
    """Raised when a record index falls outside the history."""

    def __init__(self, index: int, length: int):
        super().__init__(f"Index {index} out of range for history of {length} games")
        self.index = index
        self.length = length


class History(Sequence):
    """Ordered, immutable sequence of game records.

    Insertion order is chronological order. Slicing and ``last_n`` return new
    History objects so windows keep the same accessors.
    """

    __slots__ = ("_records", "_multipliers")

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: tuple[Record, ...] = tuple(records)
        self._multipliers: np.ndarray | None = None

    @classmethod
    def from_multipliers(cls, values: Iterable[float], start: int = 1) -> "History":
        """Build history from bare multipliers, numbering games from ``start``."""
        return cls(
            Record(game_number=start + i, multiplier=float(v)) for i, v in enumerate(values)
        )

    @classmethod
    def from_buffer(cls, buffer: Sequence[float], total_games: int) -> "History":
        """Materialize records from a flat ``[game, mult, game, mult, ...]`` buffer.

        Args:
            buffer: Flat numeric buffer, record ``i`` at offsets ``2i`` and ``2i+1``
            total_games: Number of records encoded in the buffer

        Returns:
            History with ``total_games`` records

        Raises:
            ValueError: If total_games is negative or the buffer is too short
        """
        if total_games < 0:
            raise ValueError(f"total_games must be non-negative, got {total_games}")
        if len(buffer) < 2 * total_games:
            raise ValueError(
                f"Buffer holds {len(buffer)} values, need {2 * total_games} "
                f"for {total_games} games"
            )
        return cls(
            Record(game_number=int(buffer[2 * i]), multiplier=float(buffer[2 * i + 1]))
            for i in range(total_games)
        )

    @classmethod
    def coerce(
        cls,
        history: Union["History", Sequence[Record], Sequence[dict], Sequence[float]],
        total_games: int | None = None,
    ) -> "History":
        """Accept any of the host encodings and return a History.

        Supported inputs: a History, a sequence of Records, a sequence of dicts
        with gameNumber/multiplier keys, or a flat numeric buffer (which needs
        ``total_games``).

        Raises:
            ValueError: If total_games disagrees with the record count
        """
        if isinstance(history, History):
            result = history
        elif isinstance(history, np.ndarray) or (
            len(history) > 0 and isinstance(history[0], (int, float, np.number))
        ):
            if total_games is None:
                raise ValueError("total_games is required for a flat numeric buffer")
            return cls.from_buffer(history, total_games)
        else:
            result = cls(
                item if isinstance(item, Record) else Record.from_dict(item) for item in history
            )

        if total_games is not None and total_games != len(result):
            raise ValueError(
                f"total_games={total_games} does not match history length {len(result)}"
            )
        return result

    @property
    def multipliers(self) -> np.ndarray:
        """Multipliers as a float array (cached, read-only)."""
        if self._multipliers is None:
            arr = np.array([r.multiplier for r in self._records], dtype=float)
            arr.setflags(write=False)
            self._multipliers = arr
        return self._multipliers

    @property
    def total_games(self) -> int:
        return len(self._records)

    def last_n(self, n: int) -> "History":
        """Return the final ``min(n, len)`` records. Never fails."""
        if n <= 0:
            return History()
        if n >= len(self._records):
            return self
        return History(self._records[-n:])

    def at(self, index: int) -> Record:
        """Return the record at absolute index.

        Raises:
            IndexOutOfRangeError: If index is outside [0, len)
        """
        if not 0 <= index < len(self._records):
            raise IndexOutOfRangeError(index, len(self._records))
        return self._records[index]

    @property
    def last(self) -> Record:
        """Most recent record."""
        return self.at(len(self._records) - 1)

    @overload
    def __getitem__(self, index: int) -> Record: ...

    @overload
    def __getitem__(self, index: slice) -> "History": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return History(self._records[index])
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"History({len(self._records)} games)"


def last_n(history: History, n: int) -> History:
    """Trailing window of at most ``n`` records."""
    return history.last_n(n)


def at(history: History, index: int) -> Record:
    """Record at absolute index, raising IndexOutOfRangeError outside the history."""
    return history.at(index)
