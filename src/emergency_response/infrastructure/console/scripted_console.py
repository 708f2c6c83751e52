"""Scripted console for tests and unattended runs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from ...application.interfaces.console import ConsoleIO
from ...core.exceptions import ConsoleInputExhaustedError


class ScriptedConsoleIO(ConsoleIO):
    """Console that answers prompts from a fixed list of lines.

    Everything written, prompts included, is kept in ``transcript`` so a
    run can be inspected afterwards. Reading past the last scripted line
    raises ``ConsoleInputExhaustedError``, which is the only way to stop the
    custom incident prompt short of a valid answer.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._pending: deque[str] = deque(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []
        self.transcript: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._pending)

    def feed(self, *lines: str) -> None:
        """Queue more input lines."""
        self._pending.extend(lines)

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._pending:
            raise ConsoleInputExhaustedError(prompt)
        line = self._pending.popleft()
        self.transcript.append(f"{prompt}{line}")
        return line

    def write_line(self, text: str = "") -> None:
        self.output.append(text)
        self.transcript.append(text)

    def text(self) -> str:
        """Return the transcript as a single string."""
        return "\n".join(self.transcript)
