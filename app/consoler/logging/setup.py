"""Structlog configuration and logger setup.

Importing consoler configures nothing: module loggers are lazy and render
through whatever structlog configuration the application has in place.
Applications without their own setup can call `configure_logging()` once at
startup.

Usage:
    from consoler.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - consoler.configuration.Settings
"""

import logging
import inspect
import structlog
from structlog.stdlib import BoundLogger
from typing import Optional
from consoler.configuration import settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for route dispatch.

    Route context bound by `bind_route_context` (route, namespace,
    correlation_id) is merged into every event.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance
    """
    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a lazy logger for the calling module with full path context.

    The logger resolves the structlog configuration on first use, so a
    module-level logger follows configuration done after import.

    Returns:
        Logger proxy with module context

    Example:
        # In consoler/engine.py
        logger = get_module_logger()
        # logger has context: {"component": "engine", "module_path": "consoler.engine"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None

    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.stdlib.get_logger(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
