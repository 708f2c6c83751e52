"""Base exception classes for the emergency response simulation."""

from typing import Any


class EmergencyResponseError(Exception):
    """Base exception for all simulation errors.

    ``error_code`` is a stable identifier for logs; ``details`` carries the
    offending input (an incident type, the prompt being answered) so a failed
    run can be diagnosed from the log alone.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def log_context(self) -> dict[str, Any]:
        """Return the fields to attach to a log event about this error."""
        return {"error_code": self.error_code, **self.details}

    def __str__(self) -> str:
        if self.details:
            detail_text = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
            return f"{self.message} ({detail_text})"
        return self.message


class DomainError(EmergencyResponseError):
    """Invalid incidents and other rule violations."""


class ApplicationError(EmergencyResponseError):
    """Failures while orchestrating rounds."""


class InfrastructureError(EmergencyResponseError):
    """Console and other I/O failures."""
