"""Console boundary used by the round logic."""

from abc import ABC, abstractmethod


class ConsoleIO(ABC):
    """
    Abstract line-oriented console.

    The simulation only ever reads and writes whole lines, so anything able to
    do that (a terminal, a scripted test double) can drive a game.
    """

    @abstractmethod
    def read_line(self, prompt: str = "") -> str:
        """Show a prompt and read one line of input without its line ending.

        Raises:
            ConsoleInputExhaustedError: When no more input is available
        """
        pass

    @abstractmethod
    def write_line(self, text: str = "") -> None:
        """Write one line of output."""
        pass
