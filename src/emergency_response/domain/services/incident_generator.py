"""Random incident generation."""

from __future__ import annotations

import random
from collections.abc import Sequence

from ..enums import IncidentType
from ..value_objects.incident import Incident

LOCATIONS: tuple[str, ...] = (
    "Piassa",
    "Bole",
    "Lideta",
    "CMC",
    "Megenagna",
    "Addis Ababa University",
    "Meskel Square",
    "Sar Bet",
    "Old Airport",
    "Kirkos",
)


class IncidentGenerator:
    """Creates incidents with a uniformly random type and location."""

    def __init__(
        self,
        rng: random.Random | None = None,
        incident_types: Sequence[IncidentType] | None = None,
        locations: Sequence[str] | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._incident_types = tuple(incident_types or IncidentType)
        self._locations = tuple(locations or LOCATIONS)

    @classmethod
    def seeded(cls, seed: int | None) -> IncidentGenerator:
        """Create a generator whose sequence is reproducible for a given seed."""
        return cls(rng=random.Random(seed))

    def random_incident(self) -> Incident:
        incident_type = self._rng.choice(self._incident_types)
        location = self._rng.choice(self._locations)
        return Incident(type=incident_type.value, location=location)

    def random_batch(self, count: int) -> list[Incident]:
        """Generate ``count`` independent random incidents."""
        if count < 0:
            raise ValueError("count cannot be negative")
        return [self.random_incident() for _ in range(count)]
