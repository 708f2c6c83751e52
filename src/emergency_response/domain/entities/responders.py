"""Emergency units that can be dispatched to incidents."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..enums import IncidentType
from ..value_objects.incident import Incident


class EmergencyUnit(ABC):
    """
    A responder able to handle exactly one kind of incident.

    Subclasses fix the unit's name, speed, capability and the action it
    reports when dispatched. Speed is informational only.
    """

    name: str
    speed: int
    capability: IncidentType

    def can_handle(self, incident_type: str) -> bool:
        """Check whether this unit handles the given incident type, ignoring case."""
        return incident_type.casefold() == self.capability.value.casefold()

    def respond(self, incident: Incident) -> str:
        """Return the line reported when this unit responds to an incident."""
        return f"  -> {self.name} responding to {incident}. {self.action_description()}"

    @abstractmethod
    def action_description(self) -> str:
        """Describe what the unit does on scene."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, speed={self.speed}, capability={self.capability.value!r})"


class Police(EmergencyUnit):
    """Police unit, handles crime."""

    name = "Police Unit"
    speed = 80
    capability = IncidentType.CRIME

    def action_description(self) -> str:
        return "Securing the area."


class Firefighter(EmergencyUnit):
    """Fire engine, handles fires."""

    name = "Fire Engine"
    speed = 60
    capability = IncidentType.FIRE

    def action_description(self) -> str:
        return "Extinguishing the fire."


class Ambulance(EmergencyUnit):
    """Ambulance, handles medical emergencies."""

    name = "Ambulance"
    speed = 70
    capability = IncidentType.MEDICAL

    def action_description(self) -> str:
        return "Providing medical assistance."


def default_units() -> tuple[EmergencyUnit, ...]:
    """Return the fixed roster in dispatch order."""
    return (Police(), Firefighter(), Ambulance())
