"""Next-multiplier prediction strategies for crash game histories."""

__version__ = "0.1.0"

from .data import History, Record
from .strategy import (
    BaseStrategy,
    PredictionResult,
    available_strategies,
    get_strategy,
    predict_all,
)

__all__ = [
    "BaseStrategy",
    "History",
    "PredictionResult",
    "Record",
    "available_strategies",
    "get_strategy",
    "predict_all",
]
