"""Infrastructure-specific exception classes."""

from .base import InfrastructureError


class ConsoleError(InfrastructureError):
    """Base exception for console I/O errors."""

    pass


class ConsoleInputExhaustedError(ConsoleError):
    """Raised when the console has no more input to read."""

    def __init__(self, prompt: str = "") -> None:
        super().__init__("Console input exhausted", "CONSOLE_INPUT_EXHAUSTED", {"prompt": prompt} if prompt else None)
        self.prompt = prompt
