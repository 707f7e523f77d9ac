"""Hash distribution strategy implementation."""

from .strategy import HashDistributionConfig, HashDistributionStrategy

__all__ = [
    "HashDistributionConfig",
    "HashDistributionStrategy",
]
