"""Event handlers for the event sink."""

from infrastructure.events.handlers.logging import EventLogSink

__all__ = ["EventLogSink"]
