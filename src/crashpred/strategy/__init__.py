"""Prediction strategy implementations.

Importing this package registers every built-in strategy.
"""

from .arima_garch import ArimaGarchConfig, ArimaGarchStrategy
from .base_strategy import BaseStrategy, RandomizedConfig, RandomizedStrategy, StrategyConfig
from .ema import EmaConfig, EmaStrategy
from .exp_moving_average import ExpMovingAverageConfig, ExpMovingAverageStrategy
from .hash_distribution import HashDistributionConfig, HashDistributionStrategy
from .hybrid_transformer import HybridTransformerConfig, HybridTransformerStrategy
from .lstm import LstmConfig, LstmStrategy
from .markov_chain import MarkovChainConfig, MarkovChainStrategy
from .markov_regime import MarkovRegimeConfig, MarkovRegimeStrategy
from .mean_reversion import MeanReversionConfig, MeanReversionStrategy
from .momentum import MomentumConfig, MomentumStrategy
from .moving_average import MovingAverageConfig, MovingAverageStrategy
from .pattern_recognition import PatternRecognitionConfig, PatternRecognitionStrategy
from .recent_average import RecentAverageConfig, RecentAverageStrategy
from .registry import (
    available_strategies,
    get_strategy,
    get_strategy_class,
    predict_all,
    register_strategy,
)
from .types import NEUTRAL_MULTIPLIER, PredictionResult
from .volatility_adjusted import VolatilityAdjustedConfig, VolatilityAdjustedStrategy

__all__ = [
    # Base
    "BaseStrategy",
    "RandomizedConfig",
    "RandomizedStrategy",
    "StrategyConfig",
    # Registry
    "available_strategies",
    "get_strategy",
    "get_strategy_class",
    "predict_all",
    "register_strategy",
    # Types
    "NEUTRAL_MULTIPLIER",
    "PredictionResult",
    # Averages
    "EmaConfig",
    "EmaStrategy",
    "ExpMovingAverageConfig",
    "ExpMovingAverageStrategy",
    "MovingAverageConfig",
    "MovingAverageStrategy",
    "RecentAverageConfig",
    "RecentAverageStrategy",
    # Statistical
    "ArimaGarchConfig",
    "ArimaGarchStrategy",
    "HashDistributionConfig",
    "HashDistributionStrategy",
    "MeanReversionConfig",
    "MeanReversionStrategy",
    "MomentumConfig",
    "MomentumStrategy",
    "VolatilityAdjustedConfig",
    "VolatilityAdjustedStrategy",
    # State and pattern
    "MarkovChainConfig",
    "MarkovChainStrategy",
    "MarkovRegimeConfig",
    "MarkovRegimeStrategy",
    "PatternRecognitionConfig",
    "PatternRecognitionStrategy",
    # Network
    "HybridTransformerConfig",
    "HybridTransformerStrategy",
    "LstmConfig",
    "LstmStrategy",
]
