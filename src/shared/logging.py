"""
Logging Configuration - Shared Layer

Bootstraps stdlib logging with structlog processors so that every module can
emit event-style structured logs (``logger.info("forecast.request.accepted",
country="Finland")``). Development gets a coloured console renderer,
production gets one JSON document per line.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from src.shared.consts import NOISY_LOGGERS, EnumEnvironment


def _env_or(value: Optional[str], env_key: str, default: Optional[str]) -> Optional[str]:
    if value:
        return value
    return os.environ.get(env_key, default)


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    return handlers


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure stdlib logging and structlog.

    Called once at import time of the entry points with environment variable
    defaults, then again through :func:`update_logging_from_settings` once the
    pydantic settings are loaded.

    Args:
        level: Log level name. Falls back to ``LOG_LEVEL`` then ``INFO``.
        format_string: Accepted for settings compatibility; rendering is
            delegated to structlog.
        file_path: Optional log file. Falls back to ``LOG_FILE_PATH``.
        environment: Selects the renderer (JSON for production).
    """
    log_level = _env_or(level, "LOG_LEVEL", "INFO") or "INFO"
    log_file = _env_or(file_path, "LOG_FILE_PATH", None)
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ],
    )

    handlers = _build_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    # Per-request transport chatter from the HTTP client is not useful at INFO
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.getLogger(__name__).debug(
        "Logging configured with level %s (file: %s)", log_level, log_file or "-"
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Re-apply logging configuration from the loaded application settings.

    Args:
        settings: Object exposing ``logging.level``, ``logging.format``,
            ``logging.file_path`` and ``environment``.
    """
    try:
        level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)
        configure_logging(
            level=level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except (AttributeError, OSError, ValueError) as exc:
        logging.error("Failed to update logging from settings: %s", exc)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
