"""Account commands (register, balance)."""

from pocketbank.auth import register
from pocketbank.commands.session import console, fail, get_settings, open_engine, open_store, require_login
from pocketbank.domain.amounts import format_money
from pocketbank.domain.errors import LedgerError


def register_command(username: str, password: str) -> None:
    """Register a new account with a zero balance."""
    store = open_store(get_settings())

    try:
        name = register(store, username, password)
    except LedgerError as e:
        fail(e)

    console.print(f"[green]✓[/green] Registered {name}")
    console.print("[dim]Your balance starts at 0.00[/dim]")


def balance_command(username: str, password: str) -> None:
    """Show the balance of your account."""
    settings = get_settings()
    store = open_store(settings)
    user = require_login(store, username, password)

    try:
        balance = open_engine(settings, store).balance(user)
    except LedgerError as e:
        fail(e)

    console.print(f"Balance: [bold]{format_money(balance)}[/bold]")
