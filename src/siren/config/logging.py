"""
Logging configuration for the SIREN incident service.

Standard library logging and structlog are configured together: pretty,
coloured output in development and JSON lines everywhere else.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure application logging.

    Sets up both standard library logging and structured logging
    with appropriate handlers and formatters.
    """
    settings = settings or get_settings()

    _configure_stdlib_logging(settings)
    _configure_structured_logging(settings)

    logger = get_logger("config.logging")
    logger.info(
        "Logging configuration applied",
        log_level=settings.log_level,
        log_file=settings.log_file,
        environment=settings.environment,
    )


def _configure_stdlib_logging(settings: Settings) -> None:
    """Configure standard library logging."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = []

    if settings.is_development:
        console = Console(stderr=True)
        console_handler: logging.Handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        console_handler.setFormatter(logging.Formatter(fmt="%(name)s - %(message)s", datefmt="[%X]"))
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(_json_line_formatter(settings))
    console_handler.setLevel(log_level)
    handlers.append(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(_json_line_formatter(settings))
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    # Silence noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    if not settings.debug:
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def _json_line_formatter(settings: Settings) -> logging.Formatter:
    return logging.Formatter(
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "message": "%(message)s", '
        '"module": "%(module)s", "function": "%(funcName)s", '
        '"line": %(lineno)d, "environment": "' + settings.environment + '"}'
    )


def _configure_structured_logging(settings: Settings) -> None:
    """Configure structured logging with structlog."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _environment_processor(settings),
    ]

    if settings.is_development:
        processors.extend([structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=True)])
    else:
        processors.extend([structlog.processors.format_exc_info, structlog.processors.JSONRenderer()])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, settings.log_level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def _environment_processor(settings: Settings):
    """Build a processor that adds environment information to log records."""
    environment = settings.environment
    app_version = settings.app_version

    def add_environment(logger, method_name, event_dict):
        event_dict["environment"] = environment
        event_dict["app_version"] = app_version
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
    Log errors with their type and any extra context.

    Args:
        error: The exception that occurred
        context: Additional context information
        **kwargs: Additional keyword arguments
    """
    logger = get_logger("error")

    error_context = {
        "error": str(error),
        "error_type": type(error).__name__,
        **(context or {}),
        **kwargs,
    }

    logger.error("Error occurred", **error_context, exc_info=True)
