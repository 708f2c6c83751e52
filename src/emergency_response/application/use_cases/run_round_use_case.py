"""Use case playing a single round of the simulation."""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog

from ...domain.enums import RoundMode
from ...domain.services.dispatch_service import DispatchService
from ...domain.services.incident_generator import IncidentGenerator
from ...domain.value_objects.incident import Incident
from ...domain.value_objects.score import HANDLED_POINTS, UNHANDLED_PENALTY, Score
from ..dtos.simulation_dtos import IncidentOutcome, RoundSummary
from ..interfaces.console import ConsoleIO
from .custom_incident_use_case import prompt_custom_incident

logger = structlog.get_logger(__name__)

RANDOM_BATCH_SIZE = 5
MODE_PROMPT = "Your choice (1 or 2): "


class RoundController:
    """
    Plays one round: choose a mode, collect incidents, dispatch each of them.

    Score is never stored here; it comes in as an argument and the updated
    value goes back out with the round summary.
    """

    def __init__(
        self,
        console: ConsoleIO,
        generator: IncidentGenerator,
        dispatch_service: DispatchService,
        incident_pause_seconds: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._console = console
        self._generator = generator
        self._dispatch_service = dispatch_service
        self._incident_pause_seconds = incident_pause_seconds
        self._sleep = sleep

    def choose_mode(self) -> tuple[RoundMode, bool]:
        """
        Ask how this round's incidents should be created.

        Returns:
            The chosen mode and whether it was a fallback after invalid input
        """
        self._console.write_line("Choose how to create incidents:")
        self._console.write_line(f"  1. Generate {RANDOM_BATCH_SIZE} Random Incidents")
        self._console.write_line("  2. Enter 1 Custom Incident")
        choice = self._console.read_line(MODE_PROMPT).strip()
        self._console.write_line()

        if choice == RoundMode.RANDOM.value:
            self._console.write_line(f"Creating {RANDOM_BATCH_SIZE} random emergencies...")
            return RoundMode.RANDOM, False
        if choice == RoundMode.CUSTOM.value:
            self._console.write_line("Let's create your custom emergency...")
            return RoundMode.CUSTOM, False

        logger.warning("Invalid round mode, defaulting to random", choice=choice)
        self._console.write_line(
            f"Oops, that wasn't a valid choice. Creating {RANDOM_BATCH_SIZE} random emergencies instead..."
        )
        return RoundMode.RANDOM, True

    def collect_incidents(self, mode: RoundMode) -> list[Incident]:
        if mode is RoundMode.CUSTOM:
            return [prompt_custom_incident(self._console)]
        return self._generator.random_batch(RANDOM_BATCH_SIZE)

    def play_round(self, round_number: int, score: Score) -> tuple[RoundSummary, Score]:
        """
        Play a full round.

        Args:
            round_number: 1-based round number
            score: Score before the round

        Returns:
            The round summary and the score after the round
        """
        self._console.write_line(f"--- Round {round_number} ---")
        log = logger.bind(round_number=round_number)

        mode, defaulted = self.choose_mode()
        incidents = self.collect_incidents(mode)
        log.info("Round incidents collected", mode=mode.name, incident_count=len(incidents))

        self._console.write_line(f"Handling {len(incidents)} emergency call(s) this round:")

        outcomes: list[IncidentOutcome] = []
        for index, incident in enumerate(incidents, start=1):
            self._console.write_line()
            self._console.write_line(f"Emergency #{index}: {incident}")

            outcome, score = self._dispatch_service.dispatch(incident, score)
            self._console.write_line(outcome.message)
            if outcome.handled:
                self._console.write_line(f"  Good job! +{HANDLED_POINTS} points.")
            else:
                self._console.write_line(f"  Couldn't respond properly. -{UNHANDLED_PENALTY} points.")
            outcomes.append(IncidentOutcome.from_dispatch(outcome))

            if len(incidents) > 1 and self._incident_pause_seconds > 0:
                self._sleep(self._incident_pause_seconds)

        self._console.write_line()
        self._console.write_line(f"Round {round_number} complete!")
        self._console.write_line(f"Current Score: {score}")
        self._console.write_line()

        summary = RoundSummary(
            round_number=round_number,
            mode=mode,
            mode_defaulted=defaulted,
            outcomes=outcomes,
            score_after=score.value,
        )
        log.info("Round complete", score=score.value, points_delta=summary.points_delta)
        return summary, score
