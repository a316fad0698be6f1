"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def xdg_dirs(tmp_path: Path):
    """Point XDG config and state directories into tmp_path."""
    config_home = tmp_path / "xdg-config"
    state_home = tmp_path / "xdg-state"
    with patch.dict(
        os.environ,
        {"XDG_CONFIG_HOME": str(config_home), "XDG_STATE_HOME": str(state_home)},
    ):
        yield config_home, state_home


@pytest.fixture
def app_manifest_toml() -> str:
    """Sample shellstrap.toml declaring a scoop install command."""
    return """[meta]
version = "1.0"

[installers.scoop]
command = "Install-ScoopApps"
presets = ["minimal", "full"]
"""


@pytest.fixture
def profile_repo(tmp_path: Path, app_manifest_toml: str) -> Path:
    """A cloned profile repository with an entry script and manifest."""
    repo = tmp_path / "scripts"
    repo.mkdir()
    (repo / "profile.ps1").write_text("function Install-ScoopApps { param($Preset) }\n")
    (repo / "shellstrap.toml").write_text(app_manifest_toml)
    return repo


class FakeSystem:
    """Stands in for the machine's external tools during a bootstrap.

    Replaces ``subprocess.run`` and ``shutil.which`` in
    ``shellstrap.utils.shell`` and records every command line run.

    Attributes:
        installed: Executables present on PATH.
        authenticated: Whether ``gh auth status`` succeeds.
        profiles: Startup file reported by each shell runtime.
        calls: Every command line run, in order.
    """

    def __init__(self, root: Path, manifest_toml: str | None) -> None:
        self.root = root
        self.manifest_toml = manifest_toml
        self.installed = {"scoop", "gh", "powershell", "pwsh"}
        self.authenticated = True
        self.app_exit_code = 0
        self.profiles = {
            "powershell": root / "Documents" / "WindowsPowerShell" / "profile.ps1",
            "pwsh": root / "Documents" / "PowerShell" / "profile.ps1",
        }
        self.calls: list[list[str]] = []

    def which(self, name: str) -> str | None:
        return name if name in self.installed else None

    def run(self, args: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        self.calls.append(list(args))
        exe = args[0]
        if exe not in self.installed:
            raise FileNotFoundError(exe)

        stdout = ""
        returncode = 0
        if exe == "gh" and args[1:3] == ["auth", "status"]:
            returncode = 0 if self.authenticated else 1
        elif exe == "gh" and args[1:3] == ["repo", "clone"]:
            dest = Path(args[4])
            dest.mkdir(parents=True)
            (dest / "profile.ps1").write_text("function Install-ScoopApps { param($Preset) }\n")
            if self.manifest_toml is not None:
                (dest / "shellstrap.toml").write_text(self.manifest_toml)
        elif args[-1] == "$PROFILE":
            stdout = str(self.profiles[exe]) + "\n"
        elif "-ExecutionPolicy" in args:
            returncode = self.app_exit_code

        return subprocess.CompletedProcess(args, returncode, stdout, "")

    def commands_for(self, exe: str) -> list[list[str]]:
        """Return the recorded command lines for one executable."""
        return [c for c in self.calls if c[0] == exe]

    @property
    def app_installs(self) -> list[list[str]]:
        """Recorded application install command lines."""
        return [c for c in self.calls if "-ExecutionPolicy" in c]


@pytest.fixture
def fake_system(tmp_path: Path, app_manifest_toml: str):
    """Patch process execution with a FakeSystem rooted in tmp_path."""
    system = FakeSystem(tmp_path / "home", app_manifest_toml)
    with (
        patch(
            "shellstrap.utils.shell.subprocess.run",
            side_effect=lambda *args, **kwargs: system.run(*args, **kwargs),
        ),
        patch("shellstrap.utils.shell.shutil.which", side_effect=system.which),
    ):
        yield system
