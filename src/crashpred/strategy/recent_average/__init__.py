"""Recent average strategy implementation."""

from .strategy import RecentAverageConfig, RecentAverageStrategy

__all__ = [
    "RecentAverageConfig",
    "RecentAverageStrategy",
]
