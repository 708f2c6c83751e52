"""Interactive creation of a user-described incident."""

from __future__ import annotations

import structlog

from ...core.exceptions import InvalidIncidentTypeError
from ...domain.enums import IncidentType
from ...domain.value_objects.incident import UNKNOWN_LOCATION, Incident
from ..interfaces.console import ConsoleIO

logger = structlog.get_logger(__name__)

LOCATION_PROMPT = "Where is it happening? "
INVALID_TYPE_MESSAGE = "That's not a valid emergency type. Try 'Fire', 'Crime', or 'Medical'."


def incident_type_prompt() -> str:
    return f"What kind of emergency? ({', '.join(IncidentType.display_names())}): "


def prompt_custom_incident(console: ConsoleIO) -> Incident:
    """
    Ask the user for an incident type and location.

    The type prompt repeats until a known type is entered; there is no way to
    cancel. A blank location falls back to ``UNKNOWN_LOCATION``.

    Args:
        console: Console to prompt on

    Returns:
        The incident described by the user

    Raises:
        ConsoleInputExhaustedError: If input runs out while prompting
    """
    type_prompt = incident_type_prompt()

    while True:
        raw_type = console.read_line(type_prompt)
        try:
            incident_type = IncidentType.from_text(raw_type)
            break
        except InvalidIncidentTypeError as e:
            logger.warning("Rejected incident type", incident_type=e.incident_type)
            console.write_line(INVALID_TYPE_MESSAGE)

    raw_location = console.read_line(LOCATION_PROMPT)
    if not raw_location.strip():
        console.write_line(f"Location not provided, using '{UNKNOWN_LOCATION}'.")

    incident = Incident.from_user_input(incident_type.value, raw_location)
    logger.debug("Custom incident created", incident_type=incident.type, location=incident.location)
    return incident
