"""Infrastructure layer for the emergency response simulation."""

from .console import RichConsoleIO, ScriptedConsoleIO

__all__ = [
    # Console
    "RichConsoleIO",
    "ScriptedConsoleIO",
]
