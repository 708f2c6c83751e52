"""Core exception classes for the emergency response simulation.

Domain errors describe invalid incidents, infrastructure errors describe
console failures. Everything derives from ``EmergencyResponseError`` so the
entry point can turn any of them into a logged failure.
"""

from .base import (
    ApplicationError,
    DomainError,
    EmergencyResponseError,
    InfrastructureError,
)
from .domain import InvalidIncidentError, InvalidIncidentTypeError
from .infrastructure import ConsoleError, ConsoleInputExhaustedError

__all__ = [
    # Base exceptions
    "EmergencyResponseError",
    "ApplicationError",
    "DomainError",
    "InfrastructureError",
    # Domain exceptions
    "InvalidIncidentError",
    "InvalidIncidentTypeError",
    # Infrastructure exceptions
    "ConsoleError",
    "ConsoleInputExhaustedError",
]
