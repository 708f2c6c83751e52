"""Result DTOs describing a played simulation."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from ...domain.enums import RoundMode
from ...domain.value_objects.dispatch import DispatchOutcome


class IncidentOutcome(BaseModel):
    """Outcome of dispatching a single incident."""

    incident_type: str = Field(..., description="Incident type as dispatched")
    location: str = Field(..., description="Where the incident happened")
    responder: str | None = Field(default=None, description="Name of the responding unit, if any")
    handled: bool = Field(..., description="Whether a unit responded")
    points_delta: int = Field(..., description="Score change caused by this incident")
    message: str = Field(..., description="Line reported for this dispatch")

    @classmethod
    def from_dispatch(cls, outcome: DispatchOutcome) -> IncidentOutcome:
        """Build the DTO from a domain dispatch outcome."""
        return cls(
            incident_type=outcome.incident.type,
            location=outcome.incident.location,
            responder=outcome.unit.name if outcome.unit else None,
            handled=outcome.handled,
            points_delta=outcome.points_delta,
            message=outcome.message,
        )


class RoundSummary(BaseModel):
    """Summary of one played round."""

    round_number: int = Field(..., ge=1, description="1-based round number")
    mode: RoundMode = Field(..., description="How incidents were created this round")
    mode_defaulted: bool = Field(default=False, description="Whether an invalid choice fell back to random mode")
    outcomes: list[IncidentOutcome] = Field(default_factory=list, description="Outcomes in dispatch order")
    score_after: int = Field(..., description="Score at the end of the round")

    @computed_field
    @property
    def points_delta(self) -> int:
        return sum(outcome.points_delta for outcome in self.outcomes)

    @computed_field
    @property
    def handled_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.handled)

    @computed_field
    @property
    def unhandled_count(self) -> int:
        return len(self.outcomes) - self.handled_count


class SimulationResult(BaseModel):
    """Result of a complete run."""

    rounds: list[RoundSummary] = Field(default_factory=list, description="Round summaries in play order")
    final_score: int = Field(..., description="Score after the last round")

    @computed_field
    @property
    def total_incidents(self) -> int:
        return sum(len(summary.outcomes) for summary in self.rounds)
