"""Shared setup for commands: settings, store, login and error display."""

import sys
import tomllib
from typing import NoReturn

from rich.console import Console

from pocketbank.auth import authenticate, normalize_username
from pocketbank.config import Settings, load_settings
from pocketbank.domain.errors import InvalidUsername, LedgerError, PartialTransferFailure
from pocketbank.domain.models import Username
from pocketbank.engine import LedgerEngine
from pocketbank.store.schema import get_db_path
from pocketbank.store.sqlite import SqliteAccountStore

console = Console()

EXIT_REJECTED = 1
EXIT_PARTIAL_TRANSFER = 2


def get_settings() -> Settings:
    """Load settings or exit with a readable message."""
    try:
        return load_settings()
    except (tomllib.TOMLDecodeError, ValueError) as e:
        console.print(f"[red]Invalid config: {e}[/red]", style="bold")
        sys.exit(EXIT_REJECTED)


def open_store(settings: Settings) -> SqliteAccountStore:
    """Open the configured database, which must already exist."""
    db_path = settings.db_path or get_db_path()
    if not db_path.exists():
        console.print("[red]Database not found. Run 'pocketbank init' first.[/red]", style="bold")
        sys.exit(EXIT_REJECTED)
    return SqliteAccountStore(db_path)


def open_engine(settings: Settings, store: SqliteAccountStore) -> LedgerEngine:
    return LedgerEngine(store, lock_timeout=settings.lock_timeout)


def require_login(store: SqliteAccountStore, username: str, password: str) -> Username:
    """Exit unless the credentials are valid.

    Returns:
        The username as stored, without surrounding whitespace.
    """
    try:
        name = normalize_username(username)
        valid = authenticate(store, name, password)
    except InvalidUsername:
        valid = False
    except LedgerError as e:
        fail(e)
    if not valid:
        console.print("[red]Invalid login credentials.[/red]")
        sys.exit(EXIT_REJECTED)
    return name


def fail(error: LedgerError) -> NoReturn:
    """Print a ledger error and exit with its status code."""
    if isinstance(error, PartialTransferFailure):
        console.print(f"[red]Transfer incomplete: {error}[/red]", style="bold")
        console.print(
            f"[yellow]Reconcile by crediting {error.amount:,.2f} to '{error.recipient}' "
            f"or refunding it to '{error.sender}'. Do not retry the transfer.[/yellow]"
        )
        sys.exit(EXIT_PARTIAL_TRANSFER)

    console.print(f"[red]{error}[/red]")
    if error.retryable:
        console.print("[dim]This is a temporary problem, try again.[/dim]")
    sys.exit(EXIT_REJECTED)
