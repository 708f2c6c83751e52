"""Dispatch outcome value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .incident import Incident

if TYPE_CHECKING:
    from ..entities.responders import EmergencyUnit


@dataclass(frozen=True)
class DispatchOutcome:
    """What happened when one incident was dispatched."""

    incident: Incident
    unit: EmergencyUnit | None
    points_delta: int

    @property
    def handled(self) -> bool:
        return self.unit is not None

    @property
    def message(self) -> str:
        """The line describing the response, or the lack of one."""
        if self.unit is None:
            return f"  We don't have a unit that can handle {self.incident.type} emergencies!"
        return self.unit.respond(self.incident)
