"""Infrastructure configuration module - public API.

Centralized configuration management for the event sink using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    EventListenerSettings: Suppression filter settings
    NotificationSettings: Operator notification settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    excluded = settings.listener.excluded_admin_operations
    if settings.is_production:
        ...
    ```
"""

from infrastructure.configuration.features import (
    EventListenerSettings,
    NotificationSettings,
)
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "EventListenerSettings", "NotificationSettings"]
