"""Multiplier state buckets for Markov-style classification."""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class State:
    """Half-open multiplier range [min, max) with a representative value."""

    name: str
    min: float
    max: float
    midpoint: float

    def contains(self, value: float) -> bool:
        return self.min <= value < self.max


class StateTable(Sequence):
    """Ordered, contiguous set of states covering [1.0, inf).

    The last state catches every value at or above its ``min`` regardless of
    its declared ``max``.

    Raises:
        ValueError: If the table is empty, does not start at 1.0, has an
            empty interval, or has a gap or overlap between neighbours
    """

    def __init__(self, states: Sequence[State]) -> None:
        if not states:
            raise ValueError("State table needs at least one state")
        if states[0].min != 1.0:
            raise ValueError(f"First state must start at 1.0, got {states[0].min}")
        for state in states:
            if not state.min < state.max:
                raise ValueError(f"State {state.name} has empty range [{state.min}, {state.max})")
        for prev, nxt in zip(states, states[1:]):
            if prev.max != nxt.min:
                raise ValueError(
                    f"States {prev.name} and {nxt.name} are not contiguous "
                    f"({prev.max} != {nxt.min})"
                )
        names = [s.name for s in states]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate state names: {names}")
        self._states = tuple(states)

    @property
    def names(self) -> list[str]:
        return [s.name for s in self._states]

    def by_name(self, name: str) -> State:
        for state in self._states:
            if state.name == name:
                return state
        raise KeyError(f"Unknown state {name!r}; known: {self.names}")

    def classify(self, value: float) -> State:
        return classify(value, self)

    def __getitem__(self, index):
        return self._states[index]

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __repr__(self) -> str:
        return f"StateTable({self.names})"


def classify(value: float, table: StateTable) -> State:
    """Return the first state whose [min, max) contains value.

    Values at or above the top bound (and anything no state matches) fall
    into the last state.
    """
    for state in table:
        if state.min <= value < state.max:
            return state
    return table[-1]


REGIME_STATES = StateTable(
    [
        State("LOW", 1.00, 1.50, 1.25),
        State("MED", 1.50, 2.50, 2.00),
        State("HIGH", 2.50, 5.00, 3.75),
        State("EXTREME", 5.00, math.inf, 10.00),
    ]
)

RANGE_STATES = StateTable(
    [
        State("1.00-1.50", 1.00, 1.50, 1.25),
        State("1.50-2.00", 1.50, 2.00, 1.75),
        State("2.00-3.00", 2.00, 3.00, 2.50),
        State("3.00-5.00", 3.00, 5.00, 4.00),
        State("5.00-10.00", 5.00, 10.00, 7.50),
        State("10.00+", 10.00, math.inf, 15.00),
    ]
)
