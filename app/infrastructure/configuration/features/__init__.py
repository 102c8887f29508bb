"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.event_listener import (
    EventListenerSettings,
)
from infrastructure.configuration.features.notifications import (
    NotificationSettings,
)

__all__ = [
    "EventListenerSettings",
    "NotificationSettings",
]
