"""Shared prediction types."""

from dataclasses import dataclass, field

GLOBAL_FLOOR = 1.0
MIN_CONFIDENCE = 0.0
MAX_CONFIDENCE = 100.0
NEUTRAL_MULTIPLIER = 2.0


@dataclass(frozen=True)
class PredictionResult:
    """Strategy output.

    Args:
        prediction: Predicted next multiplier (>= 1.0 once returned by a strategy)
        confidence: Self-reported certainty heuristic 0-100, not a probability
        details: Diagnostics for observers; not part of the output contract
    """

    prediction: float
    confidence: float
    details: dict = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict:
        """Contract output: exactly prediction and confidence."""
        return {"prediction": self.prediction, "confidence": self.confidence}
