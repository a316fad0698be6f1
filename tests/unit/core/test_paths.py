"""Unit tests for path management.

Tests XDG directories and the bootstrap destination helpers.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from shellstrap.core.errors import DestinationConflictError
from shellstrap.core.paths import (
    APP_NAME,
    check_destination,
    get_config_dir,
    get_config_path,
    get_environment_file_path,
    get_state_dir,
    resolve_destination,
)


class TestXdgDirs:
    """Tests for XDG directory lookups."""

    def test_default_config_dir(self) -> None:
        """get_config_dir falls back to ~/.config when XDG_CONFIG_HOME is unset."""
        with patch.dict(os.environ, {"HOME": "/home/alice"}, clear=True):
            result = get_config_dir()
            expected = Path.home() / ".config" / APP_NAME

        assert result == expected

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_config_dir() == tmp_path / APP_NAME
            assert get_config_path() == tmp_path / APP_NAME / "config.toml"

    def test_respects_xdg_state_home(self, tmp_path: Path) -> None:
        """get_state_dir respects XDG_STATE_HOME."""
        with patch.dict(os.environ, {"XDG_STATE_HOME": str(tmp_path)}):
            assert get_state_dir() == tmp_path / APP_NAME
            assert get_environment_file_path() == tmp_path / APP_NAME / "environment.toml"


class TestCheckDestination:
    """Tests for check_destination."""

    def test_missing_destination_passes(self, tmp_path: Path) -> None:
        """A destination that doesn't exist is accepted."""
        check_destination(str(tmp_path / "scripts"))

    def test_existing_directory_conflicts(self, tmp_path: Path) -> None:
        """An existing directory raises DestinationConflictError."""
        (tmp_path / "scripts").mkdir()

        with pytest.raises(DestinationConflictError, match="already exists"):
            check_destination(str(tmp_path / "scripts"))

    def test_existing_file_conflicts(self, tmp_path: Path) -> None:
        """An existing file also conflicts."""
        (tmp_path / "scripts").write_text("x")

        with pytest.raises(DestinationConflictError):
            check_destination(str(tmp_path / "scripts"))

    def test_relative_checked_against_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Relative destinations are checked against the working directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "scripts").mkdir()

        with pytest.raises(DestinationConflictError):
            check_destination("./scripts")

    def test_home_relative_conflicts(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A ~ destination is checked in the home directory, not literally."""
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        (tmp_path / "scripts").mkdir()

        with pytest.raises(DestinationConflictError, match="already exists"):
            check_destination("~/scripts")

    def test_no_side_effects(self, tmp_path: Path) -> None:
        """Checking a destination doesn't create anything."""
        check_destination(str(tmp_path / "scripts"))

        assert list(tmp_path.iterdir()) == []


class TestResolveDestination:
    """Tests for resolve_destination."""

    def test_relative_is_joined_with_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Relative paths resolve to normpath(cwd + path)."""
        monkeypatch.chdir(tmp_path)

        result = resolve_destination("./scripts")

        assert result == Path(os.path.normpath(os.path.join(os.getcwd(), "scripts")))
        assert result.is_absolute()

    def test_relative_is_normalized(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Dot segments are collapsed."""
        monkeypatch.chdir(tmp_path)

        result = resolve_destination("a/../b/./scripts")

        assert result == Path(os.getcwd()) / "b" / "scripts"

    def test_absolute_is_identity(self, tmp_path: Path) -> None:
        """Absolute paths are returned unchanged (modulo normalization)."""
        target = tmp_path / "scripts"

        assert resolve_destination(str(target)) == target
        assert resolve_destination(str(tmp_path) + "/x/../scripts") == target

    def test_does_not_require_existence(self, tmp_path: Path) -> None:
        """The resolved path need not exist."""
        result = resolve_destination(str(tmp_path / "missing" / "scripts"))

        assert not result.exists()
