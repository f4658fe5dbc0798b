"""CLI entry point for pocketbank."""

import typer

from pocketbank.commands.account import balance_command, register_command
from pocketbank.commands.admin import accounts_command, backup_command, init_command
from pocketbank.commands.money import deposit_command, send_command, withdraw_command
from pocketbank.logs import setup_logging

app = typer.Typer(
    name="pocketbank",
    help="pocketbank - A personal ledger for deposits, withdrawals and transfers",
    add_completion=False,
)

PASSWORD_ENV = "POCKETBANK_PASSWORD"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show ledger log messages"),
) -> None:
    """pocketbank - A personal ledger for deposits, withdrawals and transfers."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Update an existing database and add admins to an existing config"),
    admin: list[str] = typer.Option(None, "--admin", help="Username allowed to view all accounts (repeatable)"),
) -> None:
    """Initialize pocketbank database and configuration."""
    init_command(force, admin or None)


@app.command(name="backup")
def backup(
    output_dir: str = typer.Option(None, "--output", "-o", help="Backup directory"),
) -> None:
    """Backup your database and configuration files."""
    backup_command(output_dir)


@app.command()
def register(
    username: str,
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, confirmation_prompt=True, envvar=PASSWORD_ENV
    ),
) -> None:
    """Register a new account."""
    register_command(username, password)


@app.command()
def balance(
    user: str = typer.Option(..., "--user", "-u", help="Your username"),
    password: str = typer.Option(..., prompt=True, hide_input=True, envvar=PASSWORD_ENV, help="Your password"),
) -> None:
    """Show your balance."""
    balance_command(user, password)


@app.command()
def deposit(
    amount: str = typer.Argument(..., help="Amount, e.g. 1,234.50"),
    user: str = typer.Option(..., "--user", "-u", help="Your username"),
    password: str = typer.Option(..., prompt=True, hide_input=True, envvar=PASSWORD_ENV, help="Your password"),
) -> None:
    """Deposit money into your account."""
    deposit_command(amount, user, password)


@app.command()
def withdraw(
    amount: str = typer.Argument(..., help="Amount, e.g. 1,234.50"),
    user: str = typer.Option(..., "--user", "-u", help="Your username"),
    password: str = typer.Option(..., prompt=True, hide_input=True, envvar=PASSWORD_ENV, help="Your password"),
) -> None:
    """Withdraw money from your account."""
    withdraw_command(amount, user, password)


@app.command()
def send(
    amount: str = typer.Argument(..., help="Amount, e.g. 1,234.50"),
    recipient: str = typer.Argument(..., help="Username to send money to"),
    user: str = typer.Option(..., "--user", "-u", help="Your username"),
    password: str = typer.Option(..., prompt=True, hide_input=True, envvar=PASSWORD_ENV, help="Your password"),
) -> None:
    """Send money to another account."""
    send_command(amount, recipient, user, password)


@app.command()
def accounts(
    user: str = typer.Option(..., "--user", "-u", help="Your username"),
    password: str = typer.Option(..., prompt=True, hide_input=True, envvar=PASSWORD_ENV, help="Your password"),
) -> None:
    """Show all accounts ranked by balance (admins only)."""
    accounts_command(user, password)


if __name__ == "__main__":
    app()
