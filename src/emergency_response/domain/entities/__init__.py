"""Domain entities."""

from .responders import Ambulance, EmergencyUnit, Firefighter, Police, default_units

__all__ = ["EmergencyUnit", "Police", "Firefighter", "Ambulance", "default_units"]
