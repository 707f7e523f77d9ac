"""Pattern recognition strategy implementation."""

from .strategy import PatternRecognitionConfig, PatternRecognitionStrategy

__all__ = [
    "PatternRecognitionConfig",
    "PatternRecognitionStrategy",
]
