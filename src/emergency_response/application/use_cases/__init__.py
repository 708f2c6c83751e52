"""Application use cases."""

from .custom_incident_use_case import prompt_custom_incident
from .run_round_use_case import RANDOM_BATCH_SIZE, RoundController
from .run_simulation_use_case import TOTAL_ROUNDS, SimulationRunner

__all__ = [
    "prompt_custom_incident",
    "RoundController",
    "RANDOM_BATCH_SIZE",
    "SimulationRunner",
    "TOTAL_ROUNDS",
]
