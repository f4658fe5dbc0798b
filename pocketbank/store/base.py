"""Account store contract and the in-memory implementation.

The ledger engine only relies on single-call atomicity: one get_balance or
one set_balance never exposes a half-written balance. There are no
multi-account transactions, so the engine does its own per-account locking.
"""

import threading
from typing import Protocol

from pocketbank.domain.errors import AccountExists, StoreError
from pocketbank.domain.models import ZERO, Money, Username


class AccountStore(Protocol):
    """Balance storage consumed by the ledger engine."""

    def get_balance(self, username: Username) -> Money | None:
        """Return the balance, or None if the account does not exist."""
        ...

    def set_balance(self, username: Username, balance: Money) -> None:
        """Overwrite the balance of an existing account.

        Raises:
            StoreError: If the write fails or the account row is missing.
        """
        ...

    def exists(self, username: Username) -> bool:
        """Return True if the account exists."""
        ...


class AccountDirectory(AccountStore, Protocol):
    """Account store that also keeps credentials and can list accounts."""

    def create_account(self, username: Username, password_hash: str) -> None:
        """Create an account with a zero balance.

        Raises:
            AccountExists: If the username is taken.
        """
        ...

    def get_password_hash(self, username: Username) -> str | None:
        ...

    def list_balances(self) -> dict[Username, Money]:
        ...


class MemoryAccountStore:
    """Dictionary-backed store. Each call is atomic under an internal lock."""

    def __init__(self, balances: dict[str, Money] | None = None) -> None:
        self._lock = threading.Lock()
        self._balances: dict[Username, Money] = {}
        self._password_hashes: dict[Username, str] = {}
        for username, balance in (balances or {}).items():
            self._balances[Username(username)] = balance
            self._password_hashes[Username(username)] = ""

    def get_balance(self, username: Username) -> Money | None:
        with self._lock:
            return self._balances.get(username)

    def set_balance(self, username: Username, balance: Money) -> None:
        with self._lock:
            if username not in self._balances:
                raise StoreError(f"No account row for '{username}'")
            self._balances[username] = balance

    def exists(self, username: Username) -> bool:
        with self._lock:
            return username in self._balances

    def create_account(self, username: Username, password_hash: str) -> None:
        with self._lock:
            if username in self._balances:
                raise AccountExists(username)
            self._balances[username] = ZERO
            self._password_hashes[username] = password_hash

    def get_password_hash(self, username: Username) -> str | None:
        with self._lock:
            return self._password_hashes.get(username)

    def list_balances(self) -> dict[Username, Money]:
        with self._lock:
            return dict(self._balances)
