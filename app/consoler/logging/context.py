"""Route-scoped context binding for structured logging.

Usage:
    from consoler.logging import bind_route_context

    with bind_route_context(route="deploy"):
        logger.info("route_dispatched")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_route_context(
    route: str,
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind route context to all logs within the context manager.

    Args:
        route: Command name of the route being dispatched.
        correlation_id: Unique dispatch identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {
        "route": route,
        "correlation_id": correlation_id or str(uuid.uuid4()),
    }
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")
