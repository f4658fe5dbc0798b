"""Admin commands for init, backup, and the accounts ranking."""

import shutil
import sqlite3
import sys
from datetime import datetime
from pathlib import Path

from rich.table import Table

from pocketbank.commands.session import console, fail, get_settings, open_store, require_login
from pocketbank.config import add_admin, create_default_config, get_config_path
from pocketbank.domain.amounts import format_money
from pocketbank.domain.errors import LedgerError
from pocketbank.domain.ranking import rank_accounts
from pocketbank.store.schema import get_db_path, get_xdg_data_home, init_database


def init_command(force: bool = False, admins: list[str] | None = None) -> None:
    """Initialize pocketbank database and configuration."""
    config_path = get_config_path()
    config_exists = config_path.exists()
    db_path = get_settings().db_path if config_exists else None
    db_path = db_path or get_db_path()
    db_exists = db_path.exists()

    # Guard: refuse to touch an existing setup without force flag
    if not force and (db_exists or config_exists):
        console.print("[red]Initialization failed:[/red]", style="bold")
        if db_exists:
            console.print(f"  Database already exists: {db_path}")
        if config_exists:
            console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'pocketbank init --force' to update the schema and add admins[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Initializing database at {db_path}...[/cyan]")
        init_database(db_path)
        if db_exists:
            console.print("[green]✓[/green] Database schema is up to date (existing accounts kept)")
        else:
            console.print("[green]✓[/green] Database initialized")

        if config_exists:
            # Keep existing settings; only add the requested admins
            for name in admins or []:
                add_admin(name, config_path)
            console.print(f"[green]✓[/green] Config kept at {config_path}")
        else:
            console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
            create_default_config(config_path, admins=admins)
            console.print("[green]✓[/green] Config file created (permissions: 600)")

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Initialization complete![/green]", style="bold")
    if admins:
        console.print(f"[dim]Admins: {', '.join(admins)}[/dim]")


def backup_command(output_dir: str | None = None) -> None:
    """Backup database and configuration files."""
    settings = get_settings()
    db_path = settings.db_path or get_db_path()
    config_path = get_config_path()

    if not db_path.exists():
        console.print("[red]Database not found. Run 'pocketbank init' first.[/red]", style="bold")
        sys.exit(1)

    backup_dir = Path(output_dir).expanduser() if output_dir else get_xdg_data_home() / "pocketbank" / "backups"
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)

        db_backup = backup_dir / f"pocketbank_{timestamp}.db"
        shutil.copy2(db_path, db_backup)
        console.print(f"[green]✓[/green] Database backed up to: {db_backup}")

        if config_path.exists():
            config_backup = backup_dir / f"config_{timestamp}.toml"
            shutil.copy2(config_path, config_backup)
            console.print(f"[green]✓[/green] Config backed up to: {config_backup}")

    except OSError as e:
        console.print(f"[red]Backup failed: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Backup complete![/green]", style="bold")


def accounts_command(username: str, password: str) -> None:
    """Show every account ranked by balance (admins only)."""
    settings = get_settings()
    store = open_store(settings)
    user = require_login(store, username, password)

    if user not in settings.admins:
        console.print("[red]Only admins can view all accounts.[/red]")
        sys.exit(1)

    try:
        ranking = rank_accounts(store.list_balances())
    except LedgerError as e:
        fail(e)

    if not ranking:
        console.print("[yellow]No accounts found[/yellow]")
        return

    table = Table(title="Accounts and Balances")
    table.add_column("Rank", justify="right", style="dim")
    table.add_column("Username", style="cyan")
    table.add_column("Balance", justify="right")

    for row in ranking:
        table.add_row(str(row.rank), row.username, format_money(row.balance))

    console.print(table)
