"""Registration notification settings."""

from pydantic import EmailStr, Field

from infrastructure.configuration.base import FeatureSettings


class NotificationSettings(FeatureSettings):
    """Operator notification configuration.

    Environment Variables:
        OPERATOR_EMAIL: Address notified when a new user self-registers
        ADMIN_CONSOLE_BASE_URL: Admin console prefix used to build the
            deep link to the new account (``<base>/<realm>/users/<user>``)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        operator = settings.notifications.OPERATOR_EMAIL
        ```
    """

    OPERATOR_EMAIL: EmailStr = Field(default="admin@example.com", alias="OPERATOR_EMAIL")
    ADMIN_CONSOLE_BASE_URL: str = Field(
        default="http://localhost:8080/admin/master/console/#/realms",
        alias="ADMIN_CONSOLE_BASE_URL",
    )
