"""Unit tests for canonical event rendering."""

import pytest

from infrastructure.events import EventType, OperationType
from modules.event_listener.renderer import NULL_MARKER, render

pytestmark = pytest.mark.unit


class TestUserEventRendering:
    """UserEvent lines."""

    def test_fixed_field_order(self, user_event_factory):
        event = user_event_factory(type=EventType.LOGIN)

        assert render(event) == (
            "type=LOGIN, realmId=master, clientId=account, userId=user-1, "
            "ipAddress=10.0.0.1"
        )

    def test_absent_fields_use_null_marker(self, user_event_factory):
        event = user_event_factory(
            type=EventType.LOGOUT, client_id=None, user_id=None, ip_address=None
        )

        assert render(event) == (
            f"type=LOGOUT, realmId=master, clientId={NULL_MARKER}, "
            f"userId={NULL_MARKER}, ipAddress={NULL_MARKER}"
        )

    def test_error_follows_ip_address(self, user_event_factory):
        event = user_event_factory(
            type=EventType.LOGIN_ERROR,
            error="invalid_user_credentials",
            details={"username": "alice"},
        )

        assert render(event).endswith(
            "ipAddress=10.0.0.1, error=invalid_user_credentials, username=alice"
        )

    def test_empty_error_is_still_rendered(self, user_event_factory):
        event = user_event_factory(error="")

        assert render(event).endswith(", error=")

    def test_no_error_field_when_absent(self, user_event_factory):
        assert "error=" not in render(user_event_factory())

    def test_details_keep_insertion_order(self, user_event_factory):
        event = user_event_factory(
            details={
                "username": "alice",
                "auth_method": "openid-connect",
                "code_id": "c-1",
            }
        )

        assert render(event).endswith(
            "ipAddress=10.0.0.1, username=alice, auth_method=openid-connect, "
            "code_id=c-1"
        )

    def test_detail_with_space_is_quoted(self, user_event_factory):
        event = user_event_factory(details={"reason": "too many attempts"})

        assert render(event).endswith(", reason='too many attempts'")

    def test_absent_detail_renders_empty(self, user_event_factory):
        event = user_event_factory(details={"remember_me": None, "username": "bob"})

        assert render(event).endswith(", remember_me=, username=bob")

    def test_embedded_quote_is_not_escaped(self, user_event_factory):
        event = user_event_factory(details={"reason": "it's gone"})

        assert render(event).endswith(", reason='it's gone'")

    def test_quote_without_space_stays_unquoted(self, user_event_factory):
        event = user_event_factory(details={"reason": "it's"})

        assert render(event).endswith(", reason=it's")

    def test_line_breaks_are_escaped(self, user_event_factory):
        event = user_event_factory(
            error="first\nsecond", details={"note": "a\r\nb c"}
        )

        line = render(event)

        assert "\n" not in line and "\r" not in line
        assert "error=first\\nsecond" in line
        assert "note='a\\r\\nb c'" in line


class TestAdminEventRendering:
    """AdminEvent lines."""

    def test_fixed_field_order(self, admin_event_factory):
        event = admin_event_factory(operation_type=OperationType.CREATE)

        assert render(event) == (
            "operationType=CREATE, realmId=master, clientId=admin-cli, "
            "userId=admin-1, ipAddress=127.0.0.1, resourcePath=users/user-1"
        )

    def test_error_is_appended(self, admin_event_factory):
        event = admin_event_factory(
            operation_type=OperationType.DELETE, error="not_found"
        )

        assert render(event).endswith("resourcePath=users/user-1, error=not_found")

    def test_representation_is_not_rendered(self, admin_event_factory):
        event = admin_event_factory(representation='{"username": "alice"}')

        assert "alice" not in render(event)

    def test_absent_auth_details_use_null_marker(self, admin_event_factory):
        event = admin_event_factory(
            realm_id=None, client_id=None, user_id=None, ip_address=None,
            resource_path=None,
        )

        assert render(event) == (
            "operationType=CREATE, realmId=null, clientId=null, userId=null, "
            "ipAddress=null, resourcePath=null"
        )


def test_render_rejects_unknown_objects():
    with pytest.raises(TypeError):
        render({"type": "LOGIN"})
