"""Interfaces the application layer depends on."""

from .console import ConsoleIO

__all__ = ["ConsoleIO"]
