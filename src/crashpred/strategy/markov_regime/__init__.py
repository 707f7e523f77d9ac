"""Markov regime strategy implementation."""

from .strategy import MarkovRegimeConfig, MarkovRegimeStrategy

__all__ = [
    "MarkovRegimeConfig",
    "MarkovRegimeStrategy",
]
