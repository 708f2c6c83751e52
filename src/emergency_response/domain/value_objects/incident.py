"""Incident value object."""

from __future__ import annotations

from dataclasses import dataclass

from ..enums import IncidentType

UNKNOWN_LOCATION = "Unknown Location"


@dataclass(frozen=True)
class Incident:
    """An emergency waiting to be dispatched.

    ``type`` is kept as a plain string so that any value can reach the
    dispatcher; the constructors below only ever produce known types.
    """

    type: str
    location: str

    def __str__(self) -> str:
        return f"{self.type} incident at {self.location}"

    @classmethod
    def from_user_input(cls, type_text: str | None, location_text: str | None) -> Incident:
        """Create an incident from raw console input.

        The type is matched case-insensitively and stored in title case. A
        blank location becomes ``UNKNOWN_LOCATION``.

        Raises:
            InvalidIncidentTypeError: If the type text names no known type.
        """
        incident_type = IncidentType.from_text(type_text)
        return cls(type=incident_type.value, location=normalize_location(location_text))


def normalize_location(location_text: str | None) -> str:
    """Trim a location, falling back to ``UNKNOWN_LOCATION`` when blank."""
    location = (location_text or "").strip()
    return location or UNKNOWN_LOCATION
