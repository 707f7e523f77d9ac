"""Directional momentum over consecutive games."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class MomentumResult:
    """Directional move summary for a window.

    Args:
        up_moves: Count of strictly increasing steps
        down_moves: Count of strictly decreasing steps
        score: Sum of consecutive deltas divided by window length
        trend_strength: |up - down| / (length - 1), in [0, 1]
    """

    up_moves: int
    down_moves: int
    score: float
    trend_strength: float

    @property
    def direction(self) -> int:
        """+1 for net upward momentum, -1 for downward, 0 for flat."""
        return int(np.sign(self.score))


def momentum(values: np.ndarray) -> MomentumResult:
    """Count directional moves and score momentum.

    Windows shorter than two values have no moves and zero strength.
    """
    n = len(values)
    if n < 2:
        return MomentumResult(0, 0, 0.0, 0.0)

    deltas = np.diff(values)
    up = int(np.sum(deltas > 0))
    down = int(np.sum(deltas < 0))
    return MomentumResult(
        up_moves=up,
        down_moves=down,
        score=float(np.sum(deltas)) / n,
        trend_strength=abs(up - down) / (n - 1),
    )


def trend_changes(values: np.ndarray) -> int:
    """Count direction reversals between consecutive deltas.

    Flat steps neither count as a reversal nor reset the last direction.
    """
    changes = 0
    last_direction = 0
    for delta in np.diff(values):
        direction = int(np.sign(delta))
        if direction == 0:
            continue
        if last_direction != 0 and direction != last_direction:
            changes += 1
        last_direction = direction
    return changes


def mean_abs_change(values: np.ndarray) -> float:
    """Average absolute change between consecutive values (0.0 if fewer than 2)."""
    if len(values) < 2:
        return 0.0
    return float(np.mean(np.abs(np.diff(values))))
