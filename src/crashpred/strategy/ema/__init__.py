"""Adaptive exponential moving average strategy implementation."""

from .strategy import EmaConfig, EmaStrategy

__all__ = [
    "EmaConfig",
    "EmaStrategy",
]
