"""Winget installer placeholder.

winget is an accepted installer choice but has no backend yet. Every
operation fails with InstallerNotImplementedError instead of falling back
to another package manager.
"""

from typing import NoReturn

from shellstrap.core.errors import InstallerNotImplementedError
from shellstrap.installers.base import Installer
from shellstrap.models.request import InstallerChoice


class WingetInstaller(Installer):
    """Installer for winget. Not implemented."""

    @property
    def choice(self) -> InstallerChoice:
        """Return WINGET as the installer choice."""
        return InstallerChoice.WINGET

    def _unsupported(self) -> NoReturn:
        msg = "The winget installer is not implemented yet; use --installer scoop"
        raise InstallerNotImplementedError(msg)

    def check_supported(self) -> None:
        """Fail: winget is not implemented."""
        self._unsupported()

    def is_available(self) -> bool:
        """Fail: winget is not implemented."""
        self._unsupported()

    def bootstrap(self) -> None:
        """Fail: winget is not implemented."""
        self._unsupported()

    def update(self) -> None:
        """Fail: winget is not implemented."""
        self._unsupported()

    def install(self, package: str) -> None:
        """Fail: winget is not implemented."""
        self._unsupported()

    def planned_commands(self, tools: list[str]) -> list[tuple[str, str]]:
        """Fail: winget is not implemented."""
        self._unsupported()
