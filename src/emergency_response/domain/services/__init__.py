"""Domain services."""

from .dispatch_service import DispatchService
from .incident_generator import LOCATIONS, IncidentGenerator

__all__ = ["DispatchService", "IncidentGenerator", "LOCATIONS"]
