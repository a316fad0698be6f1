"""Package manager installers.

This module provides the Installer interface and its backends (scoop,
winget), plus the factory that picks one for an installer choice.
"""

from shellstrap.installers.base import Installer
from shellstrap.installers.scoop import ScoopInstaller
from shellstrap.installers.winget import WingetInstaller
from shellstrap.models.request import InstallerChoice


def get_installer(choice: str | InstallerChoice, shell: str = "powershell") -> Installer:
    """Create the installer backend for a choice.

    Args:
        choice: Installer name or InstallerChoice.
        shell: PowerShell executable used for bootstrap scripts.

    Returns:
        Installer instance.

    Raises:
        InvalidInstallerError: If choice is not a supported installer.
    """
    parsed = InstallerChoice.parse(choice)
    if parsed is InstallerChoice.SCOOP:
        return ScoopInstaller(shell=shell)
    return WingetInstaller()


__all__ = ["Installer", "ScoopInstaller", "WingetInstaller", "get_installer"]
