"""Shared fixtures."""

from decimal import Decimal
from pathlib import Path

import pytest

import pocketbank.auth
from pocketbank.domain.models import Money
from pocketbank.engine import LedgerEngine
from pocketbank.store.base import MemoryAccountStore


@pytest.fixture
def store() -> MemoryAccountStore:
    return MemoryAccountStore({"alice": Money(Decimal("1000.00")), "bob": Money(Decimal("200.00"))})


@pytest.fixture
def engine(store: MemoryAccountStore) -> LedgerEngine:
    return LedgerEngine(store, lock_timeout=1.0)


@pytest.fixture
def fast_hashing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep password hashing cheap in tests."""
    monkeypatch.setattr(pocketbank.auth, "HASH_ITERATIONS", 1_000)


@pytest.fixture
def xdg_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG data and config homes at a temporary directory."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("POCKETBANK_PASSWORD", raising=False)
    return tmp_path
