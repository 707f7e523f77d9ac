"""Descriptive statistics over a window of multipliers.

All measures are population statistics (divide by N), matching how the
strategies reason about a window as the full population of interest.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class WindowStats:
    """Summary of a window."""

    count: int
    mean: float
    variance: float
    std_dev: float
    minimum: float
    maximum: float

    @property
    def coefficient_of_variation(self) -> float:
        return self.std_dev / self.mean if self.mean != 0 else 0.0


def mean(values: np.ndarray) -> float:
    """Arithmetic mean (0.0 for an empty window)."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def variance(values: np.ndarray) -> float:
    """Population variance E[(x - mean)^2]."""
    if len(values) == 0:
        return 0.0
    return float(np.var(values))


def std_dev(values: np.ndarray) -> float:
    """Population standard deviation."""
    return float(np.sqrt(variance(values)))


def z_score(x: float, values: np.ndarray) -> float:
    """Standard score of ``x`` against the window. 0.0 if the window has no spread."""
    sd = std_dev(values)
    if sd == 0:
        return 0.0
    return (x - mean(values)) / sd


def coefficient_of_variation(values: np.ndarray) -> float:
    """Relative volatility std/mean. 0.0 if the mean is 0."""
    m = mean(values)
    if m == 0:
        return 0.0
    return std_dev(values) / m


def describe(values: np.ndarray) -> WindowStats:
    """Compute all summary statistics for a window in one pass."""
    if len(values) == 0:
        return WindowStats(0, 0.0, 0.0, 0.0, 0.0, 0.0)
    var = float(np.var(values))
    return WindowStats(
        count=len(values),
        mean=float(np.mean(values)),
        variance=var,
        std_dev=float(np.sqrt(var)),
        minimum=float(np.min(values)),
        maximum=float(np.max(values)),
    )
