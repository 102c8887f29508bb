"""Self-registration approval gate.

New self-registered accounts are disabled as soon as the registration event
is observed, and an operator is emailed a link to review and enable them.
The reaction runs after the registration has already completed, so nothing
here can affect its outcome.
"""

from html import escape
from typing import Optional

from infrastructure.events.models import UserEvent
from infrastructure.identity import AccountStore
from infrastructure.logging import get_module_logger
from infrastructure.notifications import (
    NotificationDispatcher,
    NotificationRequest,
    NotificationResult,
    Recipient,
)

logger = get_module_logger()

REGISTRATION_SUBJECT = "Self Registration with Keycloak"


def build_account_link(console_base_url: str, realm_id: str, user_id: str) -> str:
    """Admin console deep link to the account: ``<base>/<realm>/users/<user>``."""
    return f"{console_base_url.rstrip('/')}/{realm_id}/users/{user_id}"


def build_registration_notification(
    operator_email: str,
    account_email: Optional[str],
    realm_id: str,
    user_id: str,
    console_base_url: str,
) -> NotificationRequest:
    """Compose the operator email announcing a new registration.

    Args:
        operator_email: Address of the operator approving registrations
        account_email: Email of the newly registered account
        realm_id: Realm the account was created in
        user_id: Identifier of the new account
        console_base_url: Admin console prefix for the deep link

    Returns:
        NotificationRequest with plain text and HTML bodies
    """
    link = build_account_link(console_base_url, realm_id, user_id)
    email = account_email or "(no email)"

    text_body = (
        f"Hi Admin, a new user with the email {email} has just registered "
        "with keycloak! \n"
        f"To enable user go to {link} \n"
        "This is an automatic notice."
    )
    html_body = (
        "<h3>Hi Admin,</h3>"
        f"<p>a new user with the email {escape(email)} has just registered "
        "with keycloak! </p>"
        f'<p>To enable user go to <a href="{escape(link)}">user configuration</a></p>'
        "<p>This is an automatic notice.</p>"
    )

    return NotificationRequest(
        recipient=Recipient(email=operator_email, display_name="Admin"),
        subject=REGISTRATION_SUBJECT,
        text_body=text_body,
        html_body=html_body,
    )


class RegistrationReaction:
    """Disables newly registered accounts and notifies the operator.

    Lookup misses (unknown realm, unknown account) end the reaction
    silently: the event line is already in the event log and no account is
    touched and no email is sent. They are reported at debug level only.
    """

    def __init__(
        self,
        account_store: AccountStore,
        dispatcher: NotificationDispatcher,
        operator_email: str,
        console_base_url: str,
    ):
        self.account_store = account_store
        self.dispatcher = dispatcher
        self.operator_email = operator_email
        self.console_base_url = console_base_url

    def react(self, event: UserEvent) -> Optional[NotificationResult]:
        """Run the approval gate for one REGISTER event.

        Returns:
            The dispatch result, or None when a lookup missed.
        """
        realm = self.account_store.resolve_realm(event.realm_id)
        if realm is None:
            logger.debug("registration_realm_not_found", realm_id=event.realm_id)
            return None

        account = self.account_store.resolve_account(realm, event.user_id)
        if account is None:
            logger.debug(
                "registration_account_not_found",
                realm_id=event.realm_id,
                user_id=event.user_id,
            )
            return None

        self.account_store.set_enabled(account, False)
        logger.info("new_user_registered", user_id=event.user_id)

        request = build_registration_notification(
            operator_email=self.operator_email,
            account_email=self.account_store.get_email(account),
            realm_id=event.realm_id,
            user_id=event.user_id,
            console_base_url=self.console_base_url,
        )
        return self.dispatcher.dispatch(
            request, smtp_config=self.account_store.get_smtp_config(realm)
        )
