"""
Logging configuration for the emergency response simulation.

Game output owns stdout, so every handler writes to stderr (or to the
optional log file). structlog events are rendered by the stdlib handlers, so
the console and the log file see the same records.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from rich.console import Console
from rich.logging import RichHandler

from ..core.exceptions.base import EmergencyResponseError
from .config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure standard library logging and structlog.

    Args:
        settings: Settings to configure from; defaults to the cached settings.
    """
    settings = settings or get_settings()
    shared_processors = _shared_processors(settings)

    _configure_stdlib_logging(settings, shared_processors)
    _configure_structured_logging(shared_processors)

    logger = get_logger("config.logging")
    logger.debug(
        "Logging configuration applied",
        log_level=settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
    )


def _shared_processors(settings: Settings) -> list[Any]:
    """Processors applied to structlog events and to plain stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _environment_processor(settings),
    ]


def _formatter(renderer: Any, shared_processors: list[Any]) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=shared_processors,
    )


def _configure_stdlib_logging(settings: Settings, shared_processors: list[Any]) -> None:
    """Configure standard library logging handlers."""
    log_level = getattr(logging, settings.log_level, logging.WARNING)
    json_renderer = structlog.processors.JSONRenderer()

    handlers: list[logging.Handler] = []

    if settings.is_development and settings.log_format == "text":
        console_handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_level=False,
            show_path=settings.debug,
            rich_tracebacks=True,
        )
        console_renderer = structlog.dev.ConsoleRenderer(colors=False)
        console_handler.setFormatter(_formatter(console_renderer, shared_processors))
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(_formatter(json_renderer, shared_processors))
    console_handler.setLevel(log_level)
    handlers.append(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # File output is always JSON
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(_formatter(json_renderer, shared_processors))
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def _configure_structured_logging(shared_processors: list[Any]) -> None:
    """Configure structlog to hand its events to the stdlib handlers."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _environment_processor(settings: Settings):
    """Build a processor tagging records with the configured environment."""

    def add_environment(logger, method_name, event_dict):
        event_dict["environment"] = settings.environment
        event_dict["app_version"] = settings.app_version
        return event_dict

    return add_environment


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name

    Returns:
        structlog.BoundLogger: Configured logger instance
    """
    return structlog.get_logger(name)


def log_error(error: Exception, context: dict[str, Any] | None = None, **kwargs: Any) -> None:
    """
    Log errors with context and structured information.

    Args:
        error: The exception that occurred
        context: Additional context information
        **kwargs: Additional keyword arguments
    """
    logger = get_logger("error")

    error_context = {
        "error": str(error),
        "error_type": type(error).__name__,
        **(error.log_context() if isinstance(error, EmergencyResponseError) else {}),
        **(context or {}),
        **kwargs,
    }

    logger.error("Error occurred", **error_context)
