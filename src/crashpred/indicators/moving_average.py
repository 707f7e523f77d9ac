"""Weighted and exponential moving averages over multipliers."""

import numpy as np

from .momentum import mean_abs_change


def linear_wma(values: np.ndarray) -> float:
    """Weighted moving average with linear weights 1..n (most recent heaviest).

    Returns 0.0 for an empty window.
    """
    n = len(values)
    if n == 0:
        return 0.0
    weights = np.arange(1, n + 1)
    return float(np.sum(np.asarray(values) * weights) / np.sum(weights))


def exp_weighted_average(values: np.ndarray) -> float:
    """Weighted average with weights exp(i / n) for i in 0..n-1."""
    n = len(values)
    if n == 0:
        return 0.0
    weights = np.exp(np.arange(n) / n)
    return float(np.sum(np.asarray(values) * weights) / np.sum(weights))


def ema(values: np.ndarray, alpha: float) -> float:
    """Exponential moving average seeded with the first value.

    Args:
        values: Window of multipliers, oldest first
        alpha: Smoothing factor in (0, 1]; higher reacts faster

    Returns:
        Final EMA value (0.0 for an empty window)
    """
    if len(values) == 0:
        return 0.0
    result = float(values[0])
    for value in values[1:]:
        result = alpha * float(value) + (1 - alpha) * result
    return result


def adaptive_alpha(values: np.ndarray, low: float = 0.1, high: float = 0.3) -> float:
    """Smoothing factor from volatility: half the mean absolute change, clipped to [low, high]."""
    return float(np.clip(mean_abs_change(values) / 2, low, high))


def truncate_to_cents(value: float) -> float:
    """Round down to two decimals the way the game displays multipliers."""
    return float(np.floor(value * 100) / 100)
