"""Tests for interactive custom incident creation."""

import pytest

from emergency_response.application.use_cases.custom_incident_use_case import (
    INVALID_TYPE_MESSAGE,
    LOCATION_PROMPT,
    incident_type_prompt,
    prompt_custom_incident,
)
from emergency_response.core.exceptions import ConsoleInputExhaustedError
from emergency_response.infrastructure.console.scripted_console import ScriptedConsoleIO


class TestPromptCustomIncident:
    """Test prompt_custom_incident."""

    def test_valid_input(self):
        """Test a valid type and location produce an incident directly."""
        console = ScriptedConsoleIO(["Crime", "Bole"])

        incident = prompt_custom_incident(console)

        assert incident.type == "Crime"
        assert incident.location == "Bole"
        assert console.prompts == [incident_type_prompt(), LOCATION_PROMPT]
        assert console.output == []

    def test_type_prompt_text(self):
        assert incident_type_prompt() == "What kind of emergency? (Fire, Crime, Medical): "

    @pytest.mark.parametrize("raw_type", ["fire", "FIRE", "FiRe"])
    def test_type_normalized(self, raw_type):
        """Test any casing normalizes to title case."""
        incident = prompt_custom_incident(ScriptedConsoleIO([raw_type, "Piassa"]))

        assert incident.type == "Fire"

    def test_reprompts_until_valid(self):
        """Test invalid types are rejected with a message and asked again."""
        console = ScriptedConsoleIO(["Flood", "", "earthquake", "medical", "CMC"])

        incident = prompt_custom_incident(console)

        assert incident.type == "Medical"
        assert console.output.count(INVALID_TYPE_MESSAGE) == 3
        assert console.prompts.count(incident_type_prompt()) == 4

    def test_empty_location(self):
        """Test an empty location becomes 'Unknown Location' with a notice."""
        console = ScriptedConsoleIO(["Fire", ""])

        incident = prompt_custom_incident(console)

        assert incident.location == "Unknown Location"
        assert "Location not provided, using 'Unknown Location'." in console.output

    def test_type_loop_is_unbounded(self):
        """Test the type prompt never gives up on its own.

        The only way out without a valid type is running out of input.
        """
        console = ScriptedConsoleIO(["nope"] * 50)

        with pytest.raises(ConsoleInputExhaustedError):
            prompt_custom_incident(console)

        assert console.output.count(INVALID_TYPE_MESSAGE) == 50
        assert console.remaining == 0
