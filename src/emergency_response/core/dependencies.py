"""Wiring of the simulation's collaborators."""

from __future__ import annotations

import time
from collections.abc import Callable

from ..application.interfaces.console import ConsoleIO
from ..application.use_cases.run_round_use_case import RoundController
from ..application.use_cases.run_simulation_use_case import SimulationRunner
from ..config.config import Settings
from ..domain.services.dispatch_service import DispatchService
from ..domain.services.incident_generator import IncidentGenerator
from ..infrastructure.console.rich_console import RichConsoleIO


def get_dispatch_service() -> DispatchService:
    """Get a dispatch service over the fixed unit roster."""
    return DispatchService()


def get_incident_generator(settings: Settings) -> IncidentGenerator:
    """Get an incident generator, seeded when the settings ask for it."""
    return IncidentGenerator.seeded(settings.random_seed)


def get_console() -> ConsoleIO:
    return RichConsoleIO()


def build_simulation_runner(
    settings: Settings,
    console: ConsoleIO | None = None,
    generator: IncidentGenerator | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> SimulationRunner:
    """
    Build a ready-to-run simulation.

    Args:
        settings: Application settings
        console: Console to play on; defaults to the terminal
        generator: Incident generator; defaults to one built from settings
        sleep: Function used for pacing pauses

    Returns:
        SimulationRunner instance
    """
    console = console or get_console()
    dispatch_service = get_dispatch_service()

    round_controller = RoundController(
        console=console,
        generator=generator or get_incident_generator(settings),
        dispatch_service=dispatch_service,
        incident_pause_seconds=settings.incident_pause_seconds,
        sleep=sleep,
    )
    return SimulationRunner(
        console=console,
        round_controller=round_controller,
        unit_names=[unit.name for unit in dispatch_service.units],
        round_pause_seconds=settings.round_pause_seconds,
        wait_for_exit=settings.wait_for_exit,
        sleep=sleep,
    )
