"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_route_context(): Context manager for route-scoped logging
    - get_correlation_id(): Get current correlation ID from context
"""

from consoler.logging.setup import (
    configure_logging,
    get_module_logger,
)

from consoler.logging.context import (
    bind_route_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_route_context",
    "get_correlation_id",
]
