"""Game record data type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """Single observed game round."""

    game_number: int
    multiplier: float  # >= 1.0 by game convention

    def to_dict(self) -> dict:
        """Convert to dictionary using the host's field names."""
        return {"gameNumber": self.game_number, "multiplier": self.multiplier}

    @classmethod
    def from_dict(cls, data: dict) -> "Record":
        """Create Record from dictionary.

        Accepts either the host names (gameNumber) or snake case (game_number).
        """
        game_number = data.get("gameNumber", data.get("game_number"))
        if game_number is None or "multiplier" not in data:
            raise ValueError(f"Record requires gameNumber and multiplier, got {sorted(data)}")
        return cls(game_number=int(game_number), multiplier=float(data["multiplier"]))
