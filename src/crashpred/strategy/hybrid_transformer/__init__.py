"""Hybrid BiLSTM/CNN/attention strategy implementation."""

from .strategy import HybridTransformerConfig, HybridTransformerStrategy

__all__ = [
    "HybridTransformerConfig",
    "HybridTransformerStrategy",
]
