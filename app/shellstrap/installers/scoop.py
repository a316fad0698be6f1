"""Scoop installer implementation.

Bootstraps, updates and installs packages with scoop.
"""

import logging
import os

from shellstrap.core.errors import CommandFailedError, ToolNotFoundError
from shellstrap.installers.base import Installer
from shellstrap.models.request import InstallerChoice
from shellstrap.utils.shell import (
    command_exists,
    format_command,
    prepend_path,
    resolve_executable,
    run_interactive,
)

logger = logging.getLogger(__name__)

SCOOP_INSTALL_URL = "https://get.scoop.sh"

# Scoop's documented installer needs a relaxed execution policy for the user.
SCOOP_BOOTSTRAP_SCRIPT = (
    "Set-ExecutionPolicy -ExecutionPolicy RemoteSigned -Scope CurrentUser -Force; "
    f"Invoke-RestMethod -Uri {SCOOP_INSTALL_URL} | Invoke-Expression"
)


def scoop_shims_dir() -> str:
    """Return the directory scoop puts its command shims in."""
    root = os.environ.get("SCOOP") or os.path.join(os.path.expanduser("~"), "scoop")
    return os.path.join(root, "shims")


class ScoopInstaller(Installer):
    """Installer backed by scoop.

    Attributes:
        shell: PowerShell executable used to run the scoop bootstrap.
    """

    def __init__(self, shell: str = "powershell") -> None:
        self._shell = shell

    @property
    def choice(self) -> InstallerChoice:
        """Return SCOOP as the installer choice."""
        return InstallerChoice.SCOOP

    def is_available(self) -> bool:
        """Check if scoop is on PATH."""
        return command_exists("scoop")

    def _bootstrap_args(self) -> list[str]:
        return [
            resolve_executable(self._shell),
            "-NoLogo",
            "-NoProfile",
            "-Command",
            SCOOP_BOOTSTRAP_SCRIPT,
        ]

    def _scoop_args(self, *args: str) -> list[str]:
        return [resolve_executable("scoop"), *args]

    def _run(self, args: list[str], step: str) -> None:
        try:
            returncode = run_interactive(args)
        except OSError as e:
            msg = f"{step} failed: cannot run {args[0]}: {e}"
            raise ToolNotFoundError(msg) from e
        if returncode != 0:
            raise CommandFailedError(step, returncode)

    def bootstrap(self) -> None:
        """Install scoop with its documented PowerShell one-liner.

        The installer only updates the user PATH, so the shims directory is
        added to this process's PATH for the installs that follow.
        """
        self._run(self._bootstrap_args(), "Installing scoop")
        prepend_path(scoop_shims_dir())

    def update(self) -> None:
        """Run ``scoop update``."""
        self._run(self._scoop_args("update"), "Updating scoop")

    def install(self, package: str) -> None:
        """Run ``scoop install <package>``."""
        self._run(self._scoop_args("install", package), f"Installing {package}")

    def planned_commands(self, tools: list[str]) -> list[tuple[str, str]]:
        """Describe the bootstrap/update and tool installs."""
        if self.is_available():
            commands = [("Update scoop", format_command(self._scoop_args("update")))]
        else:
            commands = [("Install scoop", format_command(self._bootstrap_args()))]
        for tool in tools:
            commands.append((f"Install {tool}", format_command(self._scoop_args("install", tool))))
        return commands
