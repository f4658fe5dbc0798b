"""SQLite-backed account store."""

import sqlite3
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pocketbank.domain.amounts import to_money
from pocketbank.domain.errors import AccountExists, StoreError
from pocketbank.domain.models import Money, Username
from pocketbank.store.schema import get_db_path


class SqliteAccountStore:
    """Account store over a single SQLite file.

    Every method opens its own connection, so one instance can be shared
    between threads. Each method is a single statement or a single
    transaction, which gives the per-call atomicity the engine needs.
    """

    def __init__(self, db_path: Path | None = None, timeout: float = 5.0) -> None:
        """Create a store.

        Args:
            db_path: Path to the database file. If None, uses default location.
            timeout: Seconds SQLite waits on a locked database file.
        """
        self.db_path = db_path if db_path is not None else get_db_path()
        self.timeout = timeout

    def _connect(self) -> sqlite3.Connection:
        """Create a database connection with row factory.

        Raises:
            StoreError: If the database can't be opened.
        """
        try:
            conn = sqlite3.connect(self.db_path, timeout=self.timeout)
        except sqlite3.Error as e:
            raise StoreError(f"Can't open database {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

    def get_balance(self, username: Username) -> Money | None:
        """Get the balance of an account.

        Args:
            username: Account username.

        Returns:
            Balance, or None if the account does not exist.

        Raises:
            StoreError: If database operation fails or the stored balance is not a valid amount.
        """
        conn = self._connect()
        try:
            cursor = conn.execute("SELECT balance FROM accounts WHERE username = ?", (username,))
            row = cursor.fetchone()
            return to_money(Decimal(row["balance"])) if row else None
        except (sqlite3.Error, InvalidOperation) as e:
            raise StoreError(f"Can't read balance for '{username}': {e}") from e
        finally:
            conn.close()

    def set_balance(self, username: Username, balance: Money) -> None:
        """Overwrite the balance of an account.

        Args:
            username: Account username.
            balance: New balance.

        Raises:
            StoreError: If database operation fails or the account is missing.
        """
        conn = self._connect()
        try:
            cursor = conn.execute(
                "UPDATE accounts SET balance = ? WHERE username = ?",
                (str(to_money(balance)), username),
            )
            if cursor.rowcount != 1:
                conn.rollback()
                raise StoreError(f"No account row for '{username}'")
            conn.commit()
        except (sqlite3.Error, InvalidOperation) as e:
            conn.rollback()
            raise StoreError(f"Can't write balance for '{username}': {e}") from e
        finally:
            conn.close()

    def exists(self, username: Username) -> bool:
        """Check if an account exists.

        Raises:
            StoreError: If database operation fails.
        """
        conn = self._connect()
        try:
            cursor = conn.execute("SELECT 1 FROM accounts WHERE username = ?", (username,))
            return cursor.fetchone() is not None
        except sqlite3.Error as e:
            raise StoreError(f"Can't look up '{username}': {e}") from e
        finally:
            conn.close()

    def create_account(self, username: Username, password_hash: str) -> None:
        """Insert a new account with a zero balance.

        Args:
            username: Account username.
            password_hash: Encoded password hash.

        Raises:
            AccountExists: If the username is already registered.
            StoreError: If database operation fails.
        """
        conn = self._connect()
        try:
            conn.execute(
                "INSERT INTO accounts (username, password_hash, balance, created_at) VALUES (?, ?, ?, ?)",
                (username, password_hash, "0.00", datetime.now(timezone.utc).isoformat(timespec="seconds")),
            )
            conn.commit()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise AccountExists(username) from None
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"Can't create account '{username}': {e}") from e
        finally:
            conn.close()

    def get_password_hash(self, username: Username) -> str | None:
        """Get the stored password hash.

        Returns:
            Encoded hash, or None if the account does not exist.

        Raises:
            StoreError: If database operation fails.
        """
        conn = self._connect()
        try:
            cursor = conn.execute("SELECT password_hash FROM accounts WHERE username = ?", (username,))
            row = cursor.fetchone()
            return row["password_hash"] if row else None
        except sqlite3.Error as e:
            raise StoreError(f"Can't read credentials for '{username}': {e}") from e
        finally:
            conn.close()

    def list_balances(self) -> dict[Username, Money]:
        """Get every account balance.

        Returns:
            Dictionary mapping usernames to balances.

        Raises:
            StoreError: If database operation fails.
        """
        conn = self._connect()
        try:
            cursor = conn.execute("SELECT username, balance FROM accounts")
            return {Username(row["username"]): to_money(Decimal(row["balance"])) for row in cursor.fetchall()}
        except (sqlite3.Error, InvalidOperation) as e:
            raise StoreError(f"Can't list accounts: {e}") from e
        finally:
            conn.close()
