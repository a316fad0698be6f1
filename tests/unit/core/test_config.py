"""Unit tests for BootstrapConfig and config file I/O."""

import tomllib
from pathlib import Path

import pytest
from pydantic import ValidationError
from shellstrap.core.config import (
    DEFAULT_ENV_VAR,
    BootstrapConfig,
    ConfigError,
    ConfigParseError,
    get_default_config,
    load_config,
    save_config,
)


class TestBootstrapConfig:
    """Tests for the BootstrapConfig model."""

    def test_default_values(self) -> None:
        """Defaults match the reference bootstrap behavior."""
        config = BootstrapConfig()

        assert config.env_var == DEFAULT_ENV_VAR == "SCRIPT_REPO_ROOT"
        assert config.entry_script == "profile.ps1"
        assert config.manifest_filename == "shellstrap.toml"
        assert config.tools == ["git", "gh"]
        assert config.shell_runtimes == ["powershell", "pwsh"]
        assert config.strict_app_install is False
        assert config.environment_backend == "auto"

    def test_rejects_unknown_keys(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValidationError):
            BootstrapConfig.model_validate({"colour": "blue"})

    def test_rejects_invalid_env_var(self) -> None:
        """Environment variable names must be identifiers."""
        with pytest.raises(ValidationError):
            BootstrapConfig(env_var="SCRIPT ROOT")

    def test_rejects_entry_script_path(self) -> None:
        """The entry script must be a bare filename."""
        with pytest.raises(ValidationError, match="must be a filename"):
            BootstrapConfig(entry_script="scripts\\profile.ps1")

    def test_rejects_empty_runtimes(self) -> None:
        """At least one shell runtime is required."""
        with pytest.raises(ValidationError):
            BootstrapConfig(shell_runtimes=[])

    def test_rejects_unknown_backend(self) -> None:
        """environment_backend is limited to auto/user/file."""
        with pytest.raises(ValidationError):
            BootstrapConfig(environment_backend="registry")  # type: ignore[arg-type]


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing config file is not an error."""
        assert load_config(tmp_path / "config.toml") == get_default_config()

    def test_loads_partial_file(self, tmp_path: Path) -> None:
        """Settings not in the file keep their defaults."""
        path = tmp_path / "config.toml"
        path.write_text('strict_app_install = true\nshell_runtimes = ["pwsh"]\n')

        config = load_config(path)

        assert config.strict_app_install is True
        assert config.shell_runtimes == ["pwsh"]
        assert config.tools == ["git", "gh"]

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("strict_app_install = [")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('app_shell = ""\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_default_path_uses_xdg(self, xdg_dirs: tuple[Path, Path]) -> None:
        """Without a path, the XDG config file is read."""
        config_home, _ = xdg_dirs
        path = config_home / "shellstrap" / "config.toml"
        path.parent.mkdir(parents=True)
        path.write_text('env_var = "DOTFILES_ROOT"\n')

        assert load_config().env_var == "DOTFILES_ROOT"


class TestSaveConfig:
    """Tests for save_config."""

    def test_save_and_reload(self, tmp_path: Path) -> None:
        """A saved config loads back equal."""
        config = BootstrapConfig(strict_app_install=True, tools=["git", "gh", "7zip"])
        path = tmp_path / "nested" / "config.toml"

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config

    def test_writes_toml(self, tmp_path: Path) -> None:
        """The saved file is plain TOML without temp leftovers."""
        path = tmp_path / "config.toml"

        save_config(get_default_config(), path)

        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["env_var"] == "SCRIPT_REPO_ROOT"
        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]
