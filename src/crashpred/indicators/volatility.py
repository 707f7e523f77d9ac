"""Conditional variance (GARCH) and tail (EVT) estimates for multiplier windows."""

from dataclasses import dataclass
from enum import Enum

import numpy as np

# GARCH(1,1) constants; alpha + beta < 1 keeps the recursion stable
GARCH_OMEGA = 0.05
GARCH_ALPHA = 0.1
GARCH_BETA = 0.85
GARCH_STEPS = 20

HIGH_RATIO = 1.5
MODERATE_RATIO = 1.0


@dataclass(frozen=True)
class GarchResult:
    """Output of the GARCH(1,1) recursion.

    Args:
        conditional_variance: Variance after the last recursion step
        long_run_mean: Window mean the residuals were taken against
    """

    conditional_variance: float
    long_run_mean: float

    @property
    def conditional_std(self) -> float:
        return float(np.sqrt(self.conditional_variance))


@dataclass(frozen=True)
class TailEstimate:
    """Generalized-Pareto-style tail summary above mean + 2 sd.

    Args:
        threshold: Exceedance threshold
        exceedances: Count of values strictly above threshold
        tail_probability: exceedances / N
        avg_excess: Mean amount by which exceedances pass the threshold
        shape: Shape parameter xi, 0.0 with no exceedances
    """

    threshold: float
    exceedances: int
    tail_probability: float
    avg_excess: float
    shape: float


class VolatilityBand(Enum):
    """Recent volatility relative to the conditional level."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


def garch_variance(
    values: np.ndarray,
    omega: float = GARCH_OMEGA,
    alpha: float = GARCH_ALPHA,
    beta: float = GARCH_BETA,
    steps: int = GARCH_STEPS,
) -> GarchResult:
    """Run a GARCH(1,1)-style conditional variance recursion.

    Residuals are taken against the window mean. The variance is seeded with
    the mean squared residual, then updated over the last ``min(steps, N)``
    residuals: ``var = omega + alpha * r^2 + beta * var``.

    Args:
        values: Window of multipliers, oldest first
        omega: Long-run variance constant
        alpha: Weight on the latest squared residual (ARCH term)
        beta: Weight on the previous variance (GARCH term)
        steps: Maximum number of recursion steps

    Returns:
        GarchResult (zero variance and mean for an empty window)
    """
    if len(values) == 0:
        return GarchResult(0.0, 0.0)

    values = np.asarray(values, dtype=float)
    long_run_mean = float(np.mean(values))
    squared = (values - long_run_mean) ** 2

    variance = float(np.mean(squared))
    for sq in squared[-steps:]:
        variance = omega + alpha * float(sq) + beta * variance

    return GarchResult(conditional_variance=variance, long_run_mean=long_run_mean)


def evt_tail(values: np.ndarray) -> TailEstimate:
    """Estimate tail behaviour beyond mean + 2 standard deviations."""
    n = len(values)
    if n == 0:
        return TailEstimate(0.0, 0, 0.0, 0.0, 0.0)

    values = np.asarray(values, dtype=float)
    mean = float(np.mean(values))
    threshold = mean + 2 * float(np.std(values))
    exceeding = values[values > threshold]

    avg_excess = float(np.mean(exceeding - threshold)) if len(exceeding) else 0.0
    shape = 0.5 * (1 - mean / (mean + avg_excess)) if avg_excess > 0 else 0.0

    return TailEstimate(
        threshold=threshold,
        exceedances=len(exceeding),
        tail_probability=len(exceeding) / n,
        avg_excess=avg_excess,
        shape=shape,
    )


def volatility_ratio(recent_volatility: float, conditional_std: float) -> float:
    """Recent volatility over conditional sd. 0.0 when the conditional sd is 0."""
    if conditional_std == 0:
        return 0.0
    return recent_volatility / conditional_std


def classify_volatility(ratio: float) -> VolatilityBand:
    if ratio > HIGH_RATIO:
        return VolatilityBand.HIGH
    if ratio > MODERATE_RATIO:
        return VolatilityBand.MODERATE
    return VolatilityBand.LOW
