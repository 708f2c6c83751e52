"""
Pytest configuration and shared fixtures for the simulation tests.

Pauses are disabled and exit waiting is turned off so that whole games run
instantly from scripted console input.
"""

import logging
import os
import random

import pytest
import structlog

# Set test environment before imports
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["INCIDENT_PAUSE_SECONDS"] = "0"
os.environ["ROUND_PAUSE_SECONDS"] = "0"
os.environ["WAIT_FOR_EXIT"] = "false"

from emergency_response.config import Settings, get_settings
from emergency_response.domain.services.dispatch_service import DispatchService
from emergency_response.domain.services.incident_generator import IncidentGenerator
from emergency_response.infrastructure.console.scripted_console import ScriptedConsoleIO


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test see the environment as it is when the test runs."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by a test."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def settings() -> Settings:
    """Settings with pacing disabled."""
    return Settings(
        _env_file=None,
        incident_pause_seconds=0,
        round_pause_seconds=0,
        wait_for_exit=False,
    )


@pytest.fixture
def scripted_console() -> ScriptedConsoleIO:
    """Empty scripted console; tests feed it the lines they need."""
    return ScriptedConsoleIO()


@pytest.fixture
def seeded_generator() -> IncidentGenerator:
    """Generator with a reproducible sequence."""
    return IncidentGenerator(rng=random.Random(1234))


@pytest.fixture
def dispatch_service() -> DispatchService:
    return DispatchService()


@pytest.fixture
def sleep_calls() -> list[float]:
    """Records pauses requested by the code under test."""
    return []


@pytest.fixture
def fake_sleep(sleep_calls):
    return sleep_calls.append
