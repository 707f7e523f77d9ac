"""Momentum strategy implementation."""

from .strategy import MomentumConfig, MomentumStrategy

__all__ = [
    "MomentumConfig",
    "MomentumStrategy",
]
