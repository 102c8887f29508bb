"""Event models for the identity event sink.

Two variants of host event are consumed: user-facing authentication and
account events (``UserEvent``) and administrative operations
(``AdminEvent``). Both are immutable records, consumed once and discarded.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union


class EventType(str, Enum):
    """User event kinds emitted by the identity platform."""

    LOGIN = "LOGIN"
    LOGIN_ERROR = "LOGIN_ERROR"
    REGISTER = "REGISTER"
    REGISTER_ERROR = "REGISTER_ERROR"
    LOGOUT = "LOGOUT"
    LOGOUT_ERROR = "LOGOUT_ERROR"
    CODE_TO_TOKEN = "CODE_TO_TOKEN"
    CODE_TO_TOKEN_ERROR = "CODE_TO_TOKEN_ERROR"
    REFRESH_TOKEN = "REFRESH_TOKEN"
    REFRESH_TOKEN_ERROR = "REFRESH_TOKEN_ERROR"
    CLIENT_LOGIN = "CLIENT_LOGIN"
    CLIENT_LOGIN_ERROR = "CLIENT_LOGIN_ERROR"
    UPDATE_PASSWORD = "UPDATE_PASSWORD"
    UPDATE_PASSWORD_ERROR = "UPDATE_PASSWORD_ERROR"
    UPDATE_EMAIL = "UPDATE_EMAIL"
    UPDATE_PROFILE = "UPDATE_PROFILE"
    VERIFY_EMAIL = "VERIFY_EMAIL"
    SEND_VERIFY_EMAIL = "SEND_VERIFY_EMAIL"
    SEND_RESET_PASSWORD = "SEND_RESET_PASSWORD"
    RESET_PASSWORD = "RESET_PASSWORD"
    UPDATE_TOTP = "UPDATE_TOTP"
    REMOVE_TOTP = "REMOVE_TOTP"
    DELETE_ACCOUNT = "DELETE_ACCOUNT"
    IDENTITY_PROVIDER_LOGIN = "IDENTITY_PROVIDER_LOGIN"
    IDENTITY_PROVIDER_LINK_ACCOUNT = "IDENTITY_PROVIDER_LINK_ACCOUNT"


class OperationType(str, Enum):
    """Administrative operation kinds."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    ACTION = "ACTION"


def _parse_enum(enum_cls, value: Any, field_name: str):
    if isinstance(value, enum_cls):
        return value
    if value is None:
        raise ValueError(f"Invalid event data: missing {field_name}")
    try:
        return enum_cls(str(value))
    except ValueError:
        raise ValueError(f"Invalid event data: unknown {field_name} {value!r}")


@dataclass(frozen=True)
class UserEvent:
    """A user-facing authentication or account event.

    ``details`` keeps the insertion order of the host payload so that
    rendering is deterministic; it is exposed as a read-only mapping of
    strings. A kind given by name is converted to ``EventType``.
    """

    type: EventType
    """The kind of event (e.g. LOGIN, REGISTER)."""

    realm_id: Optional[str] = None
    client_id: Optional[str] = None
    user_id: Optional[str] = None
    ip_address: Optional[str] = None

    error: Optional[str] = None
    """Human-readable failure description, when the event records one."""

    details: Mapping[str, Optional[str]] = field(default_factory=dict)

    id: Optional[str] = None
    time: Optional[int] = None
    """Host timestamp in epoch milliseconds. Carried, never rendered."""

    def __post_init__(self):
        object.__setattr__(self, "type", _parse_enum(EventType, self.type, "type"))
        details = {
            str(key): None if value is None else str(value)
            for key, value in (self.details or {}).items()
        }
        object.__setattr__(self, "details", MappingProxyType(details))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the host's camelCase representation."""
        return {
            "id": self.id,
            "time": self.time,
            "type": self.type.value,
            "realmId": self.realm_id,
            "clientId": self.client_id,
            "userId": self.user_id,
            "ipAddress": self.ip_address,
            "error": self.error,
            "details": dict(self.details),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserEvent":
        """Deserialize from the host's camelCase representation.

        Raises:
            ValueError: If the event type is missing or unknown.
        """
        return cls(
            type=data.get("type"),
            realm_id=data.get("realmId"),
            client_id=data.get("clientId"),
            user_id=data.get("userId"),
            ip_address=data.get("ipAddress"),
            error=data.get("error"),
            details=data.get("details") or {},
            id=data.get("id"),
            time=data.get("time"),
        )


@dataclass(frozen=True)
class AuthDetails:
    """Who performed an administrative operation, and from where."""

    realm_id: Optional[str] = None
    client_id: Optional[str] = None
    user_id: Optional[str] = None
    ip_address: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "realmId": self.realm_id,
            "clientId": self.client_id,
            "userId": self.user_id,
            "ipAddress": self.ip_address,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AuthDetails":
        data = data or {}
        return cls(
            realm_id=data.get("realmId"),
            client_id=data.get("clientId"),
            user_id=data.get("userId"),
            ip_address=data.get("ipAddress"),
        )


@dataclass(frozen=True)
class AdminEvent:
    """An administrative operation performed against a realm resource."""

    operation_type: OperationType
    auth_details: AuthDetails = field(default_factory=AuthDetails)
    resource_path: Optional[str] = None
    error: Optional[str] = None

    resource_type: Optional[str] = None
    representation: Optional[str] = None
    """JSON representation of the resource, only sent when the host opts in."""

    id: Optional[str] = None
    time: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(
            self,
            "operation_type",
            _parse_enum(OperationType, self.operation_type, "operationType"),
        )
        if self.auth_details is None:
            object.__setattr__(self, "auth_details", AuthDetails())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the host's camelCase representation."""
        return {
            "id": self.id,
            "time": self.time,
            "operationType": self.operation_type.value,
            "authDetails": self.auth_details.to_dict(),
            "resourceType": self.resource_type,
            "resourcePath": self.resource_path,
            "representation": self.representation,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdminEvent":
        """Deserialize from the host's camelCase representation.

        Raises:
            ValueError: If the operation type is missing or unknown.
        """
        return cls(
            operation_type=data.get("operationType"),
            auth_details=AuthDetails.from_dict(data.get("authDetails")),
            resource_path=data.get("resourcePath"),
            error=data.get("error"),
            resource_type=data.get("resourceType"),
            representation=data.get("representation"),
            id=data.get("id"),
            time=data.get("time"),
        )


ListenerEvent = Union[UserEvent, AdminEvent]
