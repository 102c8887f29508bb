"""Canonical single-line rendering of listener events.

UserEvent:
    type=REGISTER, realmId=master, clientId=account, userId=42, ipAddress=10.0.0.1,
    error=invalid_user_credentials, username=alice, redirect_uri='a b'

AdminEvent:
    operationType=CREATE, realmId=master, clientId=admin-cli, userId=7,
    ipAddress=10.0.0.1, resourcePath=users/42, error=...

Absent top-level fields render as ``null``, the host platform's own marker.
Detail values containing a space are single-quoted; embedded quotes are
not escaped.
"""

from enum import Enum
from functools import singledispatch
from typing import Any, List, Optional

from infrastructure.events.models import AdminEvent, AuthDetails, UserEvent

NULL_MARKER = "null"

_LINE_BREAKS = str.maketrans({"\r": "\\r", "\n": "\\n"})


def _text(value: Any) -> str:
    if value is None:
        return NULL_MARKER
    if isinstance(value, Enum):
        value = value.value
    return str(value).translate(_LINE_BREAKS)


def _detail(key: str, value: Optional[str]) -> str:
    if value is None:
        return f"{_text(key)}="
    if " " not in value:
        return f"{_text(key)}={_text(value)}"
    # quotes inside value are emitted as-is
    return f"{_text(key)}='{_text(value)}'"


def _origin_fields(
    realm_id: Optional[str],
    client_id: Optional[str],
    user_id: Optional[str],
    ip_address: Optional[str],
) -> List[str]:
    return [
        f"realmId={_text(realm_id)}",
        f"clientId={_text(client_id)}",
        f"userId={_text(user_id)}",
        f"ipAddress={_text(ip_address)}",
    ]


@singledispatch
def render(event) -> str:
    """Render an event as one canonical log line."""
    raise TypeError(f"Cannot render {type(event).__name__}")


@render.register
def _render_user_event(event: UserEvent) -> str:
    fields = [f"type={_text(event.type)}"]
    fields += _origin_fields(
        event.realm_id, event.client_id, event.user_id, event.ip_address
    )
    if event.error is not None:
        fields.append(f"error={_text(event.error)}")
    fields += [_detail(key, value) for key, value in event.details.items()]
    return ", ".join(fields)


@render.register
def _render_admin_event(event: AdminEvent) -> str:
    auth = event.auth_details or AuthDetails()
    fields = [f"operationType={_text(event.operation_type)}"]
    fields += _origin_fields(
        auth.realm_id, auth.client_id, auth.user_id, auth.ip_address
    )
    fields.append(f"resourcePath={_text(event.resource_path)}")
    if event.error is not None:
        fields.append(f"error={_text(event.error)}")
    return ", ".join(fields)
