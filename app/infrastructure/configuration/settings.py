"""Event sink configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import (
    EventListenerSettings,
    NotificationSettings,
)


class Settings(BaseSettings):
    """Event sink configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration
    object. The instance is built once and never mutated afterwards, so it
    can be shared between threads handling events concurrently.

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        APP_NAME: Application name added to every log entry
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        excluded = settings.listener.excluded_events
        operator = settings.notifications.OPERATOR_EMAIL
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    APP_NAME: str = "identity-event-sink"
    GIT_SHA: str = "Unknown"

    listener: EventListenerSettings
    notifications: NotificationSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "listener": EventListenerSettings,
            "notifications": NotificationSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
