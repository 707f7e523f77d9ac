"""Logging setup and the prediction observer hook."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..strategy.types import PredictionResult

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Called with (strategy_name, result) after every prediction
PredictionObserver = Callable[[str, "PredictionResult"], None]


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def notify(observer: PredictionObserver | None, name: str, result: "PredictionResult") -> None:
    """Hand a result to the observer. Observer errors are logged and dropped."""
    if observer is None:
        return
    try:
        observer(name, result)
    except Exception as e:
        logger.exception(f"Prediction observer error for {name}: {e}")
