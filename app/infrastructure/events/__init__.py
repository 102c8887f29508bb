"""Infrastructure event models and the event log sink.

Usage:

    from infrastructure.events import EventLogSink, EventType, UserEvent

    event = UserEvent(
        type=EventType.LOGIN,
        realm_id="master",
        user_id="3f1c...",
        details={"username": "alice"},
    )
    EventLogSink().record("type=LOGIN, realmId=master, ...")
"""

from infrastructure.events.handlers import EventLogSink
from infrastructure.events.models import (
    AdminEvent,
    AuthDetails,
    EventType,
    ListenerEvent,
    OperationType,
    UserEvent,
)

__all__ = [
    "AdminEvent",
    "AuthDetails",
    "EventLogSink",
    "EventType",
    "ListenerEvent",
    "OperationType",
    "UserEvent",
]
