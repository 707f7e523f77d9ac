"""Weighted moving average strategy implementation."""

from .strategy import MovingAverageConfig, MovingAverageStrategy

__all__ = [
    "MovingAverageConfig",
    "MovingAverageStrategy",
]
