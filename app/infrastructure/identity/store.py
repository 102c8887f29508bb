"""Account store contract and an in-memory implementation."""

from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, Optional, Tuple

from infrastructure.identity.models import Account, Realm, SmtpConfig


class AccountStore(ABC):
    """Lookup and mutation of realms and accounts.

    Implementations wrap the identity platform's own storage. From the
    event sink's point of view every call is synchronous and atomic;
    lookups return ``None`` for unknown identifiers instead of raising.
    """

    @abstractmethod
    def resolve_realm(self, realm_id: Optional[str]) -> Optional[Realm]:
        """Return the realm, or None if it does not exist."""

    @abstractmethod
    def resolve_account(
        self, realm: Realm, user_id: Optional[str]
    ) -> Optional[Account]:
        """Return the account within ``realm``, or None if it does not exist."""

    @abstractmethod
    def set_enabled(self, account: Account, enabled: bool) -> None:
        """Enable or disable the account. Idempotent."""

    @abstractmethod
    def get_email(self, account: Account) -> Optional[str]:
        """Return the account's email address."""

    @abstractmethod
    def get_smtp_config(self, realm: Realm) -> SmtpConfig:
        """Return the realm's outgoing mail configuration."""


class InMemoryAccountStore(AccountStore):
    """Dict-backed account store.

    Safe for concurrent use: every read and write holds a single lock, and
    accounts are handed out as copies so callers never share mutable state.

    Example:
        store = InMemoryAccountStore()
        store.add_realm(Realm(id="master"))
        store.add_account(Account(id="u-1", realm_id="master", email="a@example.com"))
    """

    def __init__(self):
        self._lock = Lock()
        self._realms: Dict[str, Realm] = {}
        self._accounts: Dict[Tuple[str, str], Account] = {}

    def add_realm(self, realm: Realm) -> None:
        with self._lock:
            self._realms[realm.id] = realm

    def add_account(self, account: Account) -> None:
        with self._lock:
            self._accounts[(account.realm_id, account.id)] = account.model_copy()

    def get_account(self, realm_id: str, user_id: str) -> Optional[Account]:
        """Return a copy of the stored account, bypassing realm resolution."""
        with self._lock:
            account = self._accounts.get((realm_id, user_id))
            return account.model_copy() if account else None

    def resolve_realm(self, realm_id: Optional[str]) -> Optional[Realm]:
        if realm_id is None:
            return None
        with self._lock:
            return self._realms.get(realm_id)

    def resolve_account(
        self, realm: Realm, user_id: Optional[str]
    ) -> Optional[Account]:
        if user_id is None:
            return None
        return self.get_account(realm.id, user_id)

    def set_enabled(self, account: Account, enabled: bool) -> None:
        with self._lock:
            stored = self._accounts.get((account.realm_id, account.id))
            if stored is not None:
                stored.enabled = enabled
        account.enabled = enabled

    def get_email(self, account: Account) -> Optional[str]:
        return account.email

    def get_smtp_config(self, realm: Realm) -> SmtpConfig:
        return realm.smtp_config
