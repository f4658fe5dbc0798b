"""Tests for pocketbank.config."""

import stat
from pathlib import Path

import pytest

from pocketbank.config import (
    Settings,
    add_admin,
    create_default_config,
    get_config_path,
    load_config,
    load_settings,
    parse_settings,
)


class TestConfigFile:
    """Tests for config file helpers."""

    def test_config_path_follows_xdg(self, xdg_dirs: Path) -> None:
        """Should place config under XDG_CONFIG_HOME."""
        assert get_config_path() == xdg_dirs / "config" / "pocketbank" / "config.toml"

    def test_default_config(self, tmp_path: Path) -> None:
        """Should write default values with private permissions."""
        path = tmp_path / "pocketbank" / "config.toml"

        create_default_config(path, admins=["alice"])

        assert load_config(path) == {"lock_timeout": 5.0, "admins": ["alice"]}
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_add_admin(self, tmp_path: Path) -> None:
        """Should add an admin once."""
        path = tmp_path / "config.toml"
        create_default_config(path)

        add_admin("bob", path)
        add_admin("bob", path)

        assert load_config(path)["admins"] == ["bob"]


class TestSettings:
    """Tests for parse_settings and load_settings."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults without a config file."""
        assert load_settings(tmp_path / "missing.toml") == Settings()

    def test_parses_values(self) -> None:
        """Should read every known key."""
        settings = parse_settings({"lock_timeout": 2, "admins": ["alice"], "db_path": "/tmp/x.db"})

        assert settings.lock_timeout == 2.0
        assert settings.admins == ("alice",)
        assert settings.db_path == Path("/tmp/x.db")

    @pytest.mark.parametrize("timeout", [0, -1, "fast", True])
    def test_rejects_bad_timeout(self, timeout: object) -> None:
        """Should reject non-positive or non-numeric timeouts."""
        with pytest.raises(ValueError):
            parse_settings({"lock_timeout": timeout})

    def test_rejects_bad_admins(self) -> None:
        """Should require a list of strings."""
        with pytest.raises(ValueError):
            parse_settings({"admins": "alice"})
