"""Statistical primitives shared by the prediction strategies."""

# Descriptive statistics
from .statistics import (
    WindowStats,
    coefficient_of_variation,
    describe,
    mean,
    std_dev,
    variance,
    z_score,
)

# Momentum and averages
from .momentum import MomentumResult, mean_abs_change, momentum, trend_changes
from .moving_average import (
    adaptive_alpha,
    ema,
    exp_weighted_average,
    linear_wma,
    truncate_to_cents,
)

# States and Markov transitions
from .markov import (
    RowFallback,
    StatePrediction,
    TransitionMatrix,
    build_transitions,
    count_transitions,
    predict_next_state,
)
from .states import RANGE_STATES, REGIME_STATES, State, StateTable, classify

# Volatility
from .volatility import (
    GarchResult,
    TailEstimate,
    VolatilityBand,
    classify_volatility,
    evt_tail,
    garch_variance,
    volatility_ratio,
)

# Patterns
from .pattern import PatternMatch, find_matches, relative_distance, weighted_next_value

__all__ = [
    # Statistics
    "WindowStats",
    "coefficient_of_variation",
    "describe",
    "mean",
    "std_dev",
    "variance",
    "z_score",
    # Momentum
    "MomentumResult",
    "mean_abs_change",
    "momentum",
    "trend_changes",
    # Averages
    "adaptive_alpha",
    "ema",
    "exp_weighted_average",
    "linear_wma",
    "truncate_to_cents",
    # States
    "RANGE_STATES",
    "REGIME_STATES",
    "State",
    "StateTable",
    "classify",
    # Markov
    "RowFallback",
    "StatePrediction",
    "TransitionMatrix",
    "build_transitions",
    "count_transitions",
    "predict_next_state",
    # Volatility
    "GarchResult",
    "TailEstimate",
    "VolatilityBand",
    "classify_volatility",
    "evt_tail",
    "garch_variance",
    "volatility_ratio",
    # Patterns
    "PatternMatch",
    "find_matches",
    "relative_distance",
    "weighted_next_value",
]
