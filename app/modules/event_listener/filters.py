"""Per-event-kind suppression filter."""

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Hashable, Optional

from infrastructure.configuration import EventListenerSettings
from infrastructure.events.models import EventType, OperationType


def should_process(kind: Hashable, exclusion_set: Optional[AbstractSet]) -> bool:
    """Return False iff ``exclusion_set`` is present and contains ``kind``."""
    return not (exclusion_set and kind in exclusion_set)


@dataclass(frozen=True)
class ExclusionConfiguration:
    """Event kinds and admin operations dropped before any processing.

    Fixed for the lifetime of a listener and only ever read, so a single
    instance can be shared by concurrent calls.
    """

    excluded_events: FrozenSet[EventType] = field(default_factory=frozenset)
    excluded_admin_operations: FrozenSet[OperationType] = field(
        default_factory=frozenset
    )

    def __post_init__(self):
        object.__setattr__(
            self, "excluded_events", frozenset(self.excluded_events or ())
        )
        object.__setattr__(
            self,
            "excluded_admin_operations",
            frozenset(self.excluded_admin_operations or ()),
        )

    @classmethod
    def from_settings(cls, settings: EventListenerSettings) -> "ExclusionConfiguration":
        return cls(
            excluded_events=settings.excluded_events,
            excluded_admin_operations=settings.excluded_admin_operations,
        )

    def accepts_event(self, kind: EventType) -> bool:
        return should_process(kind, self.excluded_events)

    def accepts_admin_operation(self, operation: OperationType) -> bool:
        return should_process(operation, self.excluded_admin_operations)
