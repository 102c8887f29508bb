"""Event listener suppression settings."""

from enum import Enum
from typing import FrozenSet, Type, TypeVar

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings
from infrastructure.events.models import EventType, OperationType

E = TypeVar("E", bound=Enum)


def parse_names(raw: str, enum_cls: Type[E]) -> FrozenSet[E]:
    """Parse a comma separated list of enum names.

    Blank entries are skipped, so ``""`` and ``" , "`` both mean
    "suppress nothing".

    Raises:
        ValueError: If a name is not a member of ``enum_cls``.
    """
    names = [part.strip().upper() for part in raw.split(",")]
    unknown = [name for name in names if name and name not in enum_cls.__members__]
    if unknown:
        raise ValueError(
            f"Unknown {enum_cls.__name__} value(s): {', '.join(sorted(unknown))}"
        )
    return frozenset(enum_cls[name] for name in names if name)


class EventListenerSettings(FeatureSettings):
    """Configuration for the event listener suppression filter.

    Environment Variables:
        EXCLUDED_EVENTS: Comma separated user event types that are dropped
            before logging (e.g. ``CODE_TO_TOKEN,REFRESH_TOKEN``)
        EXCLUDED_ADMIN_OPERATIONS: Comma separated admin operation types
            that are dropped before logging (e.g. ``ACTION``)

    Unknown names are rejected when the settings are loaded.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if EventType.LOGIN in settings.listener.excluded_events:
            ...
        ```
    """

    EXCLUDED_EVENTS: str = Field(default="", alias="EXCLUDED_EVENTS")
    EXCLUDED_ADMIN_OPERATIONS: str = Field(
        default="", alias="EXCLUDED_ADMIN_OPERATIONS"
    )

    @field_validator("EXCLUDED_EVENTS")
    @classmethod
    def validate_excluded_events(cls, v: str) -> str:
        """Reject names that are not user event types."""
        parse_names(v, EventType)
        return v

    @field_validator("EXCLUDED_ADMIN_OPERATIONS")
    @classmethod
    def validate_excluded_admin_operations(cls, v: str) -> str:
        """Reject names that are not admin operation types."""
        parse_names(v, OperationType)
        return v

    @property
    def excluded_events(self) -> FrozenSet[EventType]:
        return parse_names(self.EXCLUDED_EVENTS, EventType)

    @property
    def excluded_admin_operations(self) -> FrozenSet[OperationType]:
        return parse_names(self.EXCLUDED_ADMIN_OPERATIONS, OperationType)
