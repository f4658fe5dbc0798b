"""Tests for pocketbank.auth."""

import pytest

from pocketbank.auth import authenticate, hash_password, normalize_username, register, verify_password
from pocketbank.domain.errors import AccountExists, InvalidPassword, InvalidUsername
from pocketbank.store.base import MemoryAccountStore


class TestPasswords:
    """Tests for hash_password and verify_password."""

    def test_round_trip(self) -> None:
        """Should verify the password that was hashed."""
        encoded = hash_password("s3cret", iterations=1_000)

        assert verify_password("s3cret", encoded)
        assert not verify_password("wrong", encoded)

    def test_salted(self) -> None:
        """Should produce different hashes for the same password."""
        assert hash_password("same", iterations=1_000) != hash_password("same", iterations=1_000)

    def test_encoding_format(self) -> None:
        """Should encode algorithm, rounds, salt and digest."""
        algorithm, rounds, salt, digest = hash_password("pw", iterations=1_000).split("$")

        assert algorithm == "pbkdf2_sha256"
        assert rounds == "1000"
        assert len(salt) == 32
        assert len(digest) == 64

    @pytest.mark.parametrize("encoded", ["", "plaintext", "md5$1$aa$bb", "pbkdf2_sha256$x$aa$bb", "pbkdf2_sha256$0$aa$bb"])
    def test_malformed_hash_never_matches(self, encoded: str) -> None:
        """Should reject malformed stored hashes."""
        assert not verify_password("pw", encoded)


class TestRegister:
    """Tests for register and authenticate."""

    @pytest.mark.usefixtures("fast_hashing")
    def test_register_then_login(self) -> None:
        """Should create an account at zero that accepts its password."""
        store = MemoryAccountStore()

        name = register(store, "  alice ", "pw")

        assert name == "alice"
        assert store.get_balance(name) == 0
        assert authenticate(store, "alice", "pw")
        assert not authenticate(store, "alice", "nope")

    def test_unknown_user_fails_login(self) -> None:
        """Should not authenticate a missing account."""
        assert not authenticate(MemoryAccountStore(), "ghost", "pw")

    @pytest.mark.usefixtures("fast_hashing")
    def test_duplicate_username(self) -> None:
        """Should raise AccountExists for a taken name."""
        store = MemoryAccountStore()
        register(store, "alice", "pw")

        with pytest.raises(AccountExists):
            register(store, "alice", "other")

    def test_empty_password(self) -> None:
        """Should reject an empty password."""
        with pytest.raises(InvalidPassword):
            register(MemoryAccountStore(), "alice", "")


class TestNormalizeUsername:
    """Tests for normalize_username."""

    @pytest.mark.parametrize("username", ["", "   ", "two words"])
    def test_rejects_invalid(self, username: str) -> None:
        """Should reject empty names and names with spaces."""
        with pytest.raises(InvalidUsername):
            normalize_username(username)

    def test_keeps_case(self) -> None:
        """Should not change the case of a username."""
        assert normalize_username("SparklyBird") == "SparklyBird"
