"""Application DTOs."""

from .simulation_dtos import IncidentOutcome, RoundSummary, SimulationResult

__all__ = ["IncidentOutcome", "RoundSummary", "SimulationResult"]
