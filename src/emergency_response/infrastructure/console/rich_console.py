"""Terminal console backed by rich."""

from __future__ import annotations

from rich.console import Console

from ...application.interfaces.console import ConsoleIO
from ...core.exceptions import ConsoleInputExhaustedError


class RichConsoleIO(ConsoleIO):
    """Reads from and writes to a terminal through a ``rich`` console.

    Markup, emoji and highlighting are disabled so user-supplied text is
    printed exactly as typed.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    @property
    def console(self) -> Console:
        return self._console

    def read_line(self, prompt: str = "") -> str:
        try:
            return self._console.input(prompt, markup=False, emoji=False)
        except EOFError as e:
            raise ConsoleInputExhaustedError(prompt) from e

    def write_line(self, text: str = "") -> None:
        self._console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
