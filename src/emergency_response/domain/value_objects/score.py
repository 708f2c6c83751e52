"""Score value object."""

from __future__ import annotations

from dataclasses import dataclass

HANDLED_POINTS = 10
UNHANDLED_PENALTY = 5


@dataclass(frozen=True)
class Score:
    """Running score of a simulation. Every change returns a new instance."""

    value: int = 0

    def award(self) -> Score:
        """Score for an incident a unit responded to."""
        return Score(self.value + HANDLED_POINTS)

    def penalize(self) -> Score:
        """Score for an incident no unit could handle."""
        return Score(self.value - UNHANDLED_PENALTY)

    def __str__(self) -> str:
        return str(self.value)
