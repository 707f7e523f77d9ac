"""Mean reversion strategy implementation."""

from .strategy import MeanReversionConfig, MeanReversionStrategy

__all__ = [
    "MeanReversionConfig",
    "MeanReversionStrategy",
]
