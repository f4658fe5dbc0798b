"""Account registration and password checks."""

import hashlib
import hmac
import logging
import secrets

from pocketbank.domain.errors import InvalidPassword, InvalidUsername
from pocketbank.domain.models import Username
from pocketbank.store.base import AccountDirectory

logger = logging.getLogger(__name__)

HASH_ALGORITHM = "pbkdf2_sha256"
HASH_ITERATIONS = 600_000


def hash_password(password: str, iterations: int | None = None) -> str:
    """Hash a password with a random salt.

    Args:
        password: Plain text password.
        iterations: PBKDF2 rounds. If None, uses HASH_ITERATIONS.

    Returns:
        Encoded hash as "pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>".
    """
    if iterations is None:
        iterations = HASH_ITERATIONS
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt, iterations)
    return f"{HASH_ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    """Check a password against an encoded hash.

    Malformed or empty hashes never match.
    """
    try:
        algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
        if algorithm != HASH_ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        rounds = int(iterations)
    except ValueError:
        return False
    if rounds < 1:
        return False

    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt, rounds)
    return hmac.compare_digest(digest, expected)


def normalize_username(username: str) -> Username:
    """Strip and validate a username.

    Raises:
        InvalidUsername: If the username is empty or contains whitespace.
    """
    name = username.strip()
    if not name:
        raise InvalidUsername("Username can't be empty")
    if any(char.isspace() for char in name):
        raise InvalidUsername("Username can't contain spaces")
    return Username(name)


def register(store: AccountDirectory, username: str, password: str) -> Username:
    """Create an account with a zero balance.

    Args:
        store: Store to create the account in.
        username: Requested username.
        password: Plain text password.

    Returns:
        The registered username.

    Raises:
        InvalidUsername: If the username is empty or contains whitespace.
        InvalidPassword: If the password is empty.
        AccountExists: If the username is taken.
        StoreError: If the store fails.
    """
    name = normalize_username(username)
    if not password:
        raise InvalidPassword("Password can't be empty")

    store.create_account(name, hash_password(password))
    logger.info("Registered account '%s'", name)
    return name


def authenticate(store: AccountDirectory, username: str, password: str) -> bool:
    """Check login credentials.

    Raises:
        StoreError: If the store fails.
    """
    encoded = store.get_password_hash(Username(username.strip()))
    if encoded is None:
        return False
    return verify_password(password, encoded)
