"""Markov chain strategy implementation."""

from .strategy import MarkovChainConfig, MarkovChainStrategy

__all__ = [
    "MarkovChainConfig",
    "MarkovChainStrategy",
]
