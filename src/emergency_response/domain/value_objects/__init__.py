"""Domain value objects."""

from .dispatch import DispatchOutcome
from .incident import UNKNOWN_LOCATION, Incident, normalize_location
from .score import HANDLED_POINTS, UNHANDLED_PENALTY, Score

__all__ = [
    "Incident",
    "UNKNOWN_LOCATION",
    "normalize_location",
    "DispatchOutcome",
    "Score",
    "HANDLED_POINTS",
    "UNHANDLED_PENALTY",
]
