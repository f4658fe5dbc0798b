"""Money movement commands (deposit, withdraw, send)."""

from pocketbank.commands.session import console, fail, get_settings, open_engine, open_store, require_login
from pocketbank.domain.amounts import format_money
from pocketbank.domain.errors import LedgerError


def deposit_command(amount: str, username: str, password: str) -> None:
    """Deposit money into your account.

    Args:
        amount: Amount text as typed, e.g. "1,234.50".
        username: Logged-in username.
        password: Password for username.
    """
    settings = get_settings()
    store = open_store(settings)
    user = require_login(store, username, password)

    try:
        new_balance = open_engine(settings, store).deposit(user, amount)
    except LedgerError as e:
        fail(e)

    console.print("[green]✓[/green] Deposit successful!")
    console.print(f"  Balance: {format_money(new_balance)}")


def withdraw_command(amount: str, username: str, password: str) -> None:
    """Withdraw money from your account."""
    settings = get_settings()
    store = open_store(settings)
    user = require_login(store, username, password)

    try:
        new_balance = open_engine(settings, store).withdraw(user, amount)
    except LedgerError as e:
        fail(e)

    console.print("[green]✓[/green] Withdrawal successful!")
    console.print(f"  Balance: {format_money(new_balance)}")


def send_command(amount: str, recipient: str, username: str, password: str) -> None:
    """Send money to another account.

    Args:
        amount: Amount text as typed.
        recipient: Username to send to.
        username: Logged-in username.
        password: Password for username.
    """
    settings = get_settings()
    store = open_store(settings)
    user = require_login(store, username, password)

    try:
        receipt = open_engine(settings, store).transfer(user, amount, recipient)
    except LedgerError as e:
        fail(e)

    console.print(f"[green]✓[/green] Sent {format_money(receipt.amount)} to {receipt.recipient}")
    console.print(f"  Balance: {format_money(receipt.sender_balance)}")
