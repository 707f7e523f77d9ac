"""Configuration and telemetry."""

from .config import PredictorSettings, load_settings
from .telemetry import PredictionObserver, configure_logging, notify

__all__ = [
    "PredictionObserver",
    "PredictorSettings",
    "configure_logging",
    "load_settings",
    "notify",
]
