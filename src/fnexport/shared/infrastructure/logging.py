"""
Structured logging configuration using structlog.

Provides consistent, structured logging across all modules. structlog
always renders through the stdlib logging module, so nothing is ever
printed to stdout: generated manifests written there stay clean even when
configure_logging() was never called.
"""

import logging
import sys
from typing import Any, Optional

import structlog

from fnexport.shared.infrastructure.config import Settings, settings as default_settings


def _build_processors(config: Settings) -> list[Any]:
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    # Production: JSON output
    if config.is_production:
        return shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    # Development: Pretty console output
    return shared_processors + [
        structlog.dev.ConsoleRenderer(colors=config.debug),
    ]


def _configure_structlog(config: Settings, cache: bool) -> None:
    structlog.configure(
        processors=_build_processors(config),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache,
    )


def configure_logging(stream: Any = None, config: Optional[Settings] = None) -> None:
    """
    Configure structlog for the application.

    Sets up:
    - JSON output for production
    - Pretty console output otherwise
    - Log level from settings
    - Output on stream (stderr by default)
    """
    config = config or default_settings

    _configure_structlog(config, cache=True)

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=getattr(logging, config.log_level.upper()),
        force=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Library callers that never call configure_logging() still get loggers
    routed through stdlib logging; stdlib handler setup is left to them.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("pipeline_exported", orchestrator="tekton", size=812)
    """
    if not structlog.is_configured():
        _configure_structlog(default_settings, cache=False)
    return structlog.get_logger(name)
