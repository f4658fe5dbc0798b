"""Per-account locking for the ledger engine."""

import logging
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager

from pocketbank.domain.errors import Busy

logger = logging.getLogger(__name__)


class AccountLocks:
    """One mutex per username, handed out on demand.

    Locks are always taken in sorted username order, so two operations that
    need the same pair of accounts can't deadlock each other.
    """

    def __init__(self) -> None:
        self._registry_lock = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def _lock_for(self, username: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(username)
            if lock is None:
                lock = self._locks[username] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, *usernames: str, timeout: float) -> Iterator[None]:
        """Hold the locks for every given username.

        Args:
            usernames: Accounts to lock. Duplicates are ignored.
            timeout: Total seconds to wait for all locks.

        Raises:
            Busy: If the locks could not all be acquired in time. Locks
                already taken are released first.
        """
        ordered = sorted(set(usernames))
        deadline = time.monotonic() + timeout
        held: list[threading.Lock] = []

        try:
            for username in ordered:
                lock = self._lock_for(username)
                remaining = max(deadline - time.monotonic(), 0.0)
                if not lock.acquire(timeout=remaining):
                    logger.warning("Timed out after %.2fs waiting for account '%s'", timeout, username)
                    raise Busy(f"Account '{username}' is busy, try again")
                held.append(lock)
            yield
        finally:
            for lock in reversed(held):
                lock.release()
