"""Console implementations."""

from .rich_console import RichConsoleIO
from .scripted_console import ScriptedConsoleIO

__all__ = ["RichConsoleIO", "ScriptedConsoleIO"]
