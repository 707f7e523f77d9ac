"""First-order Markov transition estimation over multiplier states."""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .states import State, StateTable, classify

MAX_CONFIDENCE = 95.0
DEGENERATE_CONFIDENCE = 50.0


class RowFallback(Enum):
    """How to fill the row of a state never observed as a source."""

    UNIFORM = "uniform"  # 1/|states| per destination
    ZERO = "zero"  # leave all-zero


@dataclass(frozen=True)
class TransitionMatrix:
    """Empirical state-to-state transition probabilities.

    Args:
        table: State table the matrix is defined over
        counts: Raw transition counts, counts[src][dst]
        probabilities: Normalized rows, probabilities[src][dst]
        fallback: Policy used for rows without observations
    """

    table: StateTable
    counts: dict[str, dict[str, int]]
    probabilities: dict[str, dict[str, float]]
    fallback: RowFallback

    def row(self, source: str) -> dict[str, float]:
        return self.probabilities[source]

    def observed(self, source: str) -> int:
        """Number of transitions observed leaving ``source``."""
        return sum(self.counts[source].values())

    @property
    def total_transitions(self) -> int:
        return sum(self.observed(name) for name in self.table.names)


@dataclass(frozen=True)
class StatePrediction:
    """Most likely next state and how dominant it is."""

    state: State
    probability: float
    confidence: float


def count_transitions(
    values: np.ndarray,
    table: StateTable,
    window: int | None = None,
) -> dict[str, dict[str, int]]:
    """Count consecutive-pair state transitions.

    Args:
        values: Multipliers, oldest first
        table: States to classify into
        window: Only count the trailing ``window`` transitions (None = all)
    """
    names = table.names
    counts = {src: {dst: 0 for dst in names} for src in names}

    n_pairs = max(0, len(values) - 1)
    start = 0 if window is None else max(0, n_pairs - window)
    states = [classify(float(v), table).name for v in values[start:]]
    for current, nxt in zip(states, states[1:]):
        counts[current][nxt] += 1
    return counts


def build_transitions(
    values: np.ndarray,
    table: StateTable,
    window: int | None = None,
    fallback: RowFallback = RowFallback.UNIFORM,
) -> TransitionMatrix:
    """Build a normalized transition matrix.

    Rows with observations are normalized to sum to 1.0. Rows never observed
    as a source follow ``fallback``.
    """
    counts = count_transitions(values, table, window)
    names = table.names
    uniform = 1.0 / len(names)

    probabilities: dict[str, dict[str, float]] = {}
    for src in names:
        total = sum(counts[src].values())
        if total > 0:
            probabilities[src] = {dst: counts[src][dst] / total for dst in names}
        elif fallback is RowFallback.UNIFORM:
            probabilities[src] = {dst: uniform for dst in names}
        else:
            probabilities[src] = {dst: 0.0 for dst in names}

    return TransitionMatrix(table, counts, probabilities, fallback)


def predict_next_state(matrix: TransitionMatrix, current: State) -> StatePrediction:
    """Pick the destination with strictly highest probability from ``current``.

    Ties keep the earliest state in table order. Confidence is the winning
    probability's share of the row (x100, capped at 95), or 50 for an
    all-zero row.
    """
    row = matrix.row(current.name)
    best = matrix.table[0]
    best_prob = 0.0
    for state in matrix.table:
        prob = row[state.name]
        if prob > best_prob:
            best_prob = prob
            best = state

    row_total = sum(row.values())
    if row_total > 0:
        confidence = min(MAX_CONFIDENCE, best_prob / row_total * 100)
    else:
        confidence = DEGENERATE_CONFIDENCE
    return StatePrediction(state=best, probability=best_prob, confidence=confidence)
