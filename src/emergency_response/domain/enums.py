"""Domain enums for incident classification and round setup."""

from __future__ import annotations

from enum import Enum

from ..core.exceptions import InvalidIncidentTypeError


class IncidentType(str, Enum):
    """Enumeration of the emergency types the simulation knows about."""

    FIRE = "Fire"
    CRIME = "Crime"
    MEDICAL = "Medical"

    @classmethod
    def from_text(cls, text: str | None) -> IncidentType:
        """Match free text against the known types, ignoring case and surrounding whitespace.

        Raises:
            InvalidIncidentTypeError: If the text names no known type.
        """
        candidate = (text or "").strip()
        for incident_type in cls:
            if candidate.casefold() == incident_type.value.casefold():
                return incident_type
        raise InvalidIncidentTypeError(candidate)

    @classmethod
    def display_names(cls) -> list[str]:
        """Return the type names in declaration order."""
        return [incident_type.value for incident_type in cls]


class RoundMode(str, Enum):
    """How the incidents of a round are created."""

    RANDOM = "1"
    CUSTOM = "2"
