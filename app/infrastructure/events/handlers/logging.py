"""Event log sink.

Writes one line per processed event, plus one diagnostic line per
notification failure, to structured logs.
"""

import logging
from typing import Any, Optional

import structlog

logger = structlog.get_logger()

# Bypasses the structlog processor chain
fallback_logger = logging.getLogger(__name__)


class EventLogSink:
    """Append-only, line-oriented event log backed by structlog."""

    def __init__(self, log: Optional[Any] = None):
        """Initialize the sink with a base logger.

        Args:
            log: Logger to write through. Defaults to the structlog logger.
        """
        self.log = (log or logger).bind(component="event_log")

    def record(self, line: str) -> None:
        """Write the rendered line for one event.

        If the structured logger fails, the line goes to the standard
        library logger instead.

        Args:
            line: Canonical single-line rendering of the event.
        """
        try:
            self.log.info("event_recorded", line=line)
        except Exception as e:
            fallback_logger.error("failed_to_log_event: %s: %s", e, line)

    def record_failure(self, message: str, **context: Any) -> None:
        """Write one diagnostic line for a failed side effect.

        Args:
            message: Human-readable failure description.
            **context: Extra fields (recipient, error_code, ...).
        """
        self.log.error("notification_failed", message=message, **context)
