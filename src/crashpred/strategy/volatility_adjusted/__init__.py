"""Volatility-adjusted strategy implementation."""

from .strategy import VolatilityAdjustedConfig, VolatilityAdjustedStrategy

__all__ = [
    "VolatilityAdjustedConfig",
    "VolatilityAdjustedStrategy",
]
