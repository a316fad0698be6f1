"""Unit tests for config CLI commands.

Tests for the shellstrap config show and shellstrap config init commands.
"""

from pathlib import Path

from shellstrap.cli.main import app
from shellstrap.core.config import load_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for shellstrap config show."""

    def test_show_defaults(self, xdg_dirs) -> None:
        """Without a config file the defaults are shown."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "SCRIPT_REPO_ROOT" in result.stdout
        assert "No config file" in result.stdout

    def test_show_file_values(self, tmp_path: Path, xdg_dirs) -> None:
        """Values from --config override the defaults."""
        path = tmp_path / "config.toml"
        path.write_text('env_var = "DOTFILES_ROOT"\n')

        result = runner.invoke(app, ["--config", str(path), "config", "show"])

        assert result.exit_code == 0
        assert "DOTFILES_ROOT" in result.stdout
        assert "Loaded from" in result.stdout


class TestConfigInit:
    """Tests for shellstrap config init."""

    def test_init_writes_defaults(self, tmp_path: Path, xdg_dirs) -> None:
        """init writes a loadable default config."""
        path = tmp_path / "config.toml"

        result = runner.invoke(app, ["--config", str(path), "config", "init"])

        assert result.exit_code == 0
        assert path.exists()
        assert load_config(path).env_var == "SCRIPT_REPO_ROOT"

    def test_init_refuses_overwrite(self, tmp_path: Path, xdg_dirs) -> None:
        """init does not overwrite an existing file without --force."""
        path = tmp_path / "config.toml"
        path.write_text('env_var = "KEEP_ME"\n')

        result = runner.invoke(app, ["--config", str(path), "config", "init"])

        assert result.exit_code == 1
        assert "KEEP_ME" in path.read_text()

    def test_init_force(self, tmp_path: Path, xdg_dirs) -> None:
        """--force overwrites an existing file."""
        path = tmp_path / "config.toml"
        path.write_text('env_var = "KEEP_ME"\n')

        result = runner.invoke(app, ["--config", str(path), "config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(path).env_var == "SCRIPT_REPO_ROOT"


class TestMainOptions:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "shellstrap version" in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without a command prints usage."""
        result = runner.invoke(app, [])

        assert "bootstrap" in result.stdout + (result.stderr or "")
