"""Tests for the rich-backed terminal console."""

import io

import pytest
from rich.console import Console

from emergency_response.core.exceptions import ConsoleInputExhaustedError
from emergency_response.infrastructure.console.rich_console import RichConsoleIO


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console_io(buffer) -> RichConsoleIO:
    return RichConsoleIO(Console(file=buffer, force_terminal=False, color_system=None, width=200))


class TestRichConsoleIO:
    """Test RichConsoleIO."""

    def test_write_line(self, console_io, buffer):
        console_io.write_line("Round 1 complete!")
        console_io.write_line()

        assert buffer.getvalue() == "Round 1 complete!\n\n"

    def test_write_line_keeps_markup_literal(self, console_io, buffer):
        """Test user text with brackets is printed as typed."""
        console_io.write_line("Fire incident at [bold]Bole[/bold]")

        assert buffer.getvalue() == "Fire incident at [bold]Bole[/bold]\n"

    def test_read_line(self, console_io, buffer, monkeypatch):
        """Test the prompt is shown and the typed line returned."""
        monkeypatch.setattr("builtins.input", lambda *args: "Fire")

        assert console_io.read_line("What kind of emergency? ") == "Fire"
        assert "What kind of emergency? " in buffer.getvalue()

    def test_eof_becomes_exhausted_error(self, console_io, monkeypatch):
        """Test end of input is reported as a console error."""

        def _eof(*args):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)

        with pytest.raises(ConsoleInputExhaustedError):
            console_io.read_line("Your choice (1 or 2): ")
