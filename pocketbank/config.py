"""Configuration file management for pocketbank."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

from pocketbank.engine import DEFAULT_LOCK_TIMEOUT


@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings."""

    lock_timeout: float = DEFAULT_LOCK_TIMEOUT
    admins: tuple[str, ...] = field(default_factory=tuple)
    db_path: Path | None = None


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pocketbank" / "config.toml"


def create_default_config(config_path: Path | None = None, admins: list[str] | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
        admins: Usernames allowed to view every account.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "lock_timeout": DEFAULT_LOCK_TIMEOUT,
        "admins": admins or [],
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def parse_settings(config: dict[str, Any]) -> Settings:
    """Build settings from a configuration dictionary.

    Unknown keys are ignored and missing keys fall back to defaults.

    Raises:
        ValueError: If a value has the wrong type or range.
    """
    lock_timeout = config.get("lock_timeout", DEFAULT_LOCK_TIMEOUT)
    if isinstance(lock_timeout, bool) or not isinstance(lock_timeout, (int, float)) or lock_timeout <= 0:
        raise ValueError(f"lock_timeout must be a positive number of seconds, got {lock_timeout!r}")

    admins = config.get("admins", [])
    if not isinstance(admins, list) or not all(isinstance(name, str) for name in admins):
        raise ValueError("admins must be a list of usernames")

    db_path = config.get("db_path")
    if db_path is not None and not isinstance(db_path, str):
        raise ValueError("db_path must be a string")

    return Settings(
        lock_timeout=float(lock_timeout),
        admins=tuple(admins),
        db_path=Path(db_path).expanduser() if db_path else None,
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, using defaults when no config file exists.

    Args:
        config_path: Path to config file. If None, uses default location.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ValueError: If a value has the wrong type or range.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return Settings()
    return parse_settings(load_config(config_path))


def add_admin(username: str, config_path: Path | None = None) -> None:
    """Allow a user to view every account.

    Args:
        username: Username to add.
        config_path: Path to config file. If None, uses default location.
    """
    config = load_config(config_path)

    admins = config.get("admins", [])
    if username not in admins:
        admins.append(username)

    config["admins"] = admins
    save_config(config, config_path)
