"""ARIMA-GARCH style strategy implementation."""

from .strategy import ArimaGarchConfig, ArimaGarchStrategy

__all__ = [
    "ArimaGarchConfig",
    "ArimaGarchStrategy",
]
