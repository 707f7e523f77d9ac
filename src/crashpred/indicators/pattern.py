"""Nearest-neighbour matching of the trailing multiplier pattern against history."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PatternMatch:
    """A historical window similar to the current pattern.

    Args:
        start: Index of the first value of the historical window
        next_value: Multiplier that followed the historical window
        similarity: 1 - mean relative distance to the current pattern
    """

    start: int
    next_value: float
    similarity: float


def relative_distance(current: np.ndarray, candidate: np.ndarray) -> float:
    """Mean over positions of |current - candidate| / current."""
    return float(np.mean(np.abs(current - candidate) / current))


def find_matches(
    values: np.ndarray,
    pattern_length: int = 5,
    search_depth: int = 500,
    max_distance: float = 0.3,
) -> list[PatternMatch]:
    """Scan backward through history for windows resembling the trailing pattern.

    Candidate windows start in the last ``min(search_depth, n - pattern_length - 1)``
    positions and must end before the current pattern's final value, so every
    candidate has a known follower.

    Args:
        values: Multipliers, oldest first
        pattern_length: Length of the pattern to match
        search_depth: How far back candidate windows may start
        max_distance: Accept candidates whose mean relative distance is below this

    Returns:
        Matches in chronological order (empty if history is too short)
    """
    values = np.asarray(values, dtype=float)
    n = len(values)
    depth = min(search_depth, n - pattern_length - 1)
    if pattern_length <= 0 or depth <= 0:
        return []

    current = values[-pattern_length:]
    matches = []
    for i in range(n - depth, n - pattern_length - 1):
        candidate = values[i : i + pattern_length]
        distance = relative_distance(current, candidate)
        if distance < max_distance:
            matches.append(
                PatternMatch(
                    start=i,
                    next_value=float(values[i + pattern_length]),
                    similarity=1 - distance,
                )
            )
    return matches


def weighted_next_value(matches: list[PatternMatch]) -> float | None:
    """Similarity-weighted mean of the values following each match.

    Returns None when there are no matches or the weights sum to zero.
    """
    total_weight = sum(m.similarity for m in matches)
    if not matches or total_weight <= 0:
        return None
    return sum(m.next_value * m.similarity for m in matches) / total_weight
