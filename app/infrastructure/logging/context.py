"""Per-event context binding for structured logging.

Every host call into the listener is an independent unit of work. Binding
its identifiers to structlog's context variables makes every diagnostic
emitted while handling the event carry them.

Usage:
    from infrastructure.logging import bind_event_context

    with bind_event_context(event_kind="REGISTER", realm_id="master"):
        logger.info("processing_event")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_event_context(
    correlation_id: Optional[str] = None,
    **context: Any,
) -> Generator[None, None, None]:
    """Bind event-scoped context to all logs within the block.

    Keys whose value is None are not bound. The bound keys are removed
    again on exit, even if the block raises.

    Args:
        correlation_id: Identifier for the unit of work. Auto-generated if
            not provided.
        **context: Additional key-value pairs (event_kind, realm_id, ...).
    """
    bound: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    bound.update({key: value for key, value in context.items() if value is not None})

    structlog.contextvars.bind_contextvars(**bound)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*bound.keys())
