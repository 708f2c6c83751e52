"""Domain service matching incidents to emergency units."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from ..entities.responders import EmergencyUnit, default_units
from ..value_objects.dispatch import DispatchOutcome
from ..value_objects.incident import Incident
from ..value_objects.score import Score

logger = structlog.get_logger(__name__)


class DispatchService:
    """Finds the unit for an incident and scores the result."""

    def __init__(self, units: Iterable[EmergencyUnit] | None = None) -> None:
        self._units: tuple[EmergencyUnit, ...] = tuple(units) if units is not None else default_units()

    @property
    def units(self) -> tuple[EmergencyUnit, ...]:
        return self._units

    def find_responder(self, incident: Incident) -> EmergencyUnit | None:
        """Return the first unit, in roster order, able to handle the incident."""
        for unit in self._units:
            if unit.can_handle(incident.type):
                return unit
        return None

    def dispatch(self, incident: Incident, score: Score) -> tuple[DispatchOutcome, Score]:
        """
        Dispatch an incident and apply the scoring rule.

        Args:
            incident: Incident to dispatch
            score: Score before this incident

        Returns:
            The dispatch outcome and the updated score
        """
        unit = self.find_responder(incident)

        if unit is None:
            new_score = score.penalize()
            logger.warning("No unit available for incident", incident_type=incident.type, location=incident.location)
        else:
            new_score = score.award()
            logger.info("Unit dispatched", unit=unit.name, incident_type=incident.type, location=incident.location)

        outcome = DispatchOutcome(incident=incident, unit=unit, points_delta=new_score.value - score.value)
        return outcome, new_score
