"""Stacked LSTM strategy implementation."""

from .strategy import LstmConfig, LstmStrategy

__all__ = [
    "LstmConfig",
    "LstmStrategy",
]
