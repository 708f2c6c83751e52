"""Domain-specific exception classes."""

from .base import DomainError


class InvalidIncidentError(DomainError):
    """Raised when incident data is invalid."""

    pass


class InvalidIncidentTypeError(InvalidIncidentError):
    """Raised when an incident type is not one of the known emergency types."""

    def __init__(self, incident_type: str) -> None:
        super().__init__(
            f"Unknown incident type: {incident_type!r}",
            "INVALID_INCIDENT_TYPE",
            {"incident_type": incident_type},
        )
        self.incident_type = incident_type
