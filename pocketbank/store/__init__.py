"""Database store layer - provides persistence for the application.

This module re-exports the store implementations and schema helpers.
"""

from pocketbank.store.base import AccountDirectory, AccountStore, MemoryAccountStore
from pocketbank.store.schema import database_exists, get_db_path, init_database
from pocketbank.store.sqlite import SqliteAccountStore

__all__ = [
    # Contract
    "AccountDirectory",
    "AccountStore",
    # Implementations
    "MemoryAccountStore",
    "SqliteAccountStore",
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
]
