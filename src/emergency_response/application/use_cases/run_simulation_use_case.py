"""Use case running a complete simulation."""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog

from ...core.exceptions import ConsoleInputExhaustedError
from ...domain.value_objects.score import Score
from ..dtos.simulation_dtos import RoundSummary, SimulationResult
from ..interfaces.console import ConsoleIO
from .run_round_use_case import RoundController

logger = structlog.get_logger(__name__)

TOTAL_ROUNDS = 5
EXIT_PROMPT = "Press Enter to exit."


class SimulationRunner:
    """Plays ``TOTAL_ROUNDS`` rounds from a zero score and reports the result."""

    def __init__(
        self,
        console: ConsoleIO,
        round_controller: RoundController,
        unit_names: list[str],
        round_pause_seconds: float = 0.0,
        wait_for_exit: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._console = console
        self._round_controller = round_controller
        self._unit_names = unit_names
        self._round_pause_seconds = round_pause_seconds
        self._wait_for_exit = wait_for_exit
        self._sleep = sleep

    def run(self) -> SimulationResult:
        """
        Run the simulation to completion.

        Returns:
            Summary of every round and the final score

        Raises:
            ConsoleInputExhaustedError: If console input ends before the last round is over
        """
        logger.info("Simulation starting", total_rounds=TOTAL_ROUNDS, units=self._unit_names)

        self._console.write_line("Emergency Response Simulation Starting")
        self._console.write_line(f"Available Units: {', '.join(self._unit_names)}")
        self._console.write_line(f"Simulation will run for {TOTAL_ROUNDS} rounds.")
        self._console.write_line()

        score = Score()
        rounds: list[RoundSummary] = []
        for round_number in range(1, TOTAL_ROUNDS + 1):
            summary, score = self._round_controller.play_round(round_number, score)
            rounds.append(summary)
            if self._round_pause_seconds > 0:
                self._sleep(self._round_pause_seconds)

        self._console.write_line("Simulation Over")
        self._console.write_line(f"Your final score: {score}")
        self._console.write_line(EXIT_PROMPT)
        if self._wait_for_exit:
            try:
                self._console.read_line()
            except ConsoleInputExhaustedError:
                logger.debug("Input closed at exit prompt")

        logger.info("Simulation finished", final_score=score.value)
        return SimulationResult(rounds=rounds, final_score=score.value)
