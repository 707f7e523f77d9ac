"""Exponentially weighted moving average strategy implementation."""

from .strategy import ExpMovingAverageConfig, ExpMovingAverageStrategy

__all__ = [
    "ExpMovingAverageConfig",
    "ExpMovingAverageStrategy",
]
