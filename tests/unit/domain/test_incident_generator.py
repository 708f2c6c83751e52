"""Tests for random incident generation."""

import random

import pytest

from emergency_response.domain.enums import IncidentType
from emergency_response.domain.services.incident_generator import LOCATIONS, IncidentGenerator


class TestIncidentGenerator:
    """Test IncidentGenerator."""

    def test_ten_fixed_locations(self):
        assert len(LOCATIONS) == 10
        assert "Bole" in LOCATIONS
        assert "Addis Ababa University" in LOCATIONS

    def test_random_incidents_are_valid(self, seeded_generator):
        """Test generated incidents only use known types and locations."""
        known_types = set(IncidentType.display_names())

        for incident in seeded_generator.random_batch(200):
            assert incident.type in known_types
            assert incident.location in LOCATIONS

    def test_all_types_eventually_generated(self, seeded_generator):
        """Test the type choice covers the whole set."""
        types = {incident.type for incident in seeded_generator.random_batch(300)}

        assert types == {"Fire", "Crime", "Medical"}

    def test_same_seed_same_sequence(self):
        """Test seeding makes runs reproducible."""
        first = IncidentGenerator.seeded(42).random_batch(10)
        second = IncidentGenerator.seeded(42).random_batch(10)

        assert first == second

    def test_restricted_pools(self):
        """Test type and location pools can be narrowed."""
        generator = IncidentGenerator(rng=random.Random(0), incident_types=[IncidentType.FIRE], locations=["Bole"])

        incidents = generator.random_batch(5)

        assert {(incident.type, incident.location) for incident in incidents} == {("Fire", "Bole")}

    def test_batch_size(self, seeded_generator):
        assert len(seeded_generator.random_batch(5)) == 5
        assert seeded_generator.random_batch(0) == []

    def test_negative_batch_rejected(self, seeded_generator):
        with pytest.raises(ValueError):
            seeded_generator.random_batch(-1)
