"""Tests for domain enums."""

import pytest

from emergency_response.core.exceptions import InvalidIncidentError, InvalidIncidentTypeError
from emergency_response.domain.enums import IncidentType, RoundMode


class TestIncidentType:
    """Test IncidentType parsing."""

    @pytest.mark.parametrize("text", ["fire", "FIRE", "FiRe", "Fire", "  fire  "])
    def test_fire_variants_normalize(self, text):
        """Test that any casing of a known type is accepted."""
        assert IncidentType.from_text(text) is IncidentType.FIRE

    def test_all_known_types(self):
        """Test that every display name parses back to its member."""
        for incident_type in IncidentType:
            assert IncidentType.from_text(incident_type.value.lower()) is incident_type

    @pytest.mark.parametrize("text", ["", "   ", "Flood", "fires", None])
    def test_unknown_types_rejected(self, text):
        """Test that unknown or empty types raise."""
        with pytest.raises(InvalidIncidentTypeError) as exc_info:
            IncidentType.from_text(text)

        assert isinstance(exc_info.value, InvalidIncidentError)
        assert exc_info.value.error_code == "INVALID_INCIDENT_TYPE"

    def test_display_names_order(self):
        """Test display names follow declaration order."""
        assert IncidentType.display_names() == ["Fire", "Crime", "Medical"]


class TestRoundMode:
    """Test RoundMode values."""

    def test_menu_values(self):
        assert RoundMode("1") is RoundMode.RANDOM
        assert RoundMode("2") is RoundMode.CUSTOM
