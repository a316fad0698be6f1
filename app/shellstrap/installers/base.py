"""Abstract base class for package manager installers.

This module defines the Installer interface that every package manager
backend must implement.
"""

import logging
from abc import ABC, abstractmethod

from shellstrap.models.request import InstallerChoice

logger = logging.getLogger(__name__)


class Installer(ABC):
    """Abstract base class for all package manager backends.

    An installer makes sure its package manager is present and current,
    then installs the auxiliary tools the rest of the bootstrap needs.
    Every method blocks until the underlying command exits; a non-zero exit
    raises CommandFailedError.

    Example:
        >>> installer = ScoopInstaller()
        >>> installer.ensure_ready(["git", "gh"])
    """

    @property
    @abstractmethod
    def choice(self) -> InstallerChoice:
        """Return the installer choice this backend handles."""

    @property
    def name(self) -> str:
        """Return the package manager name."""
        return self.choice.value

    def check_supported(self) -> None:
        """Fail early if this backend cannot be used at all.

        Raises:
            InstallerNotImplementedError: If the backend has no implementation.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the package manager executable is on PATH."""

    @abstractmethod
    def bootstrap(self) -> None:
        """Install the package manager itself.

        Raises:
            CommandFailedError: If the bootstrap command fails.
        """

    @abstractmethod
    def update(self) -> None:
        """Update the package manager.

        Raises:
            CommandFailedError: If the update command fails.
        """

    @abstractmethod
    def install(self, package: str) -> None:
        """Install a package. Already-installed packages are a no-op.

        Raises:
            CommandFailedError: If the install command fails.
        """

    @abstractmethod
    def planned_commands(self, tools: list[str]) -> list[tuple[str, str]]:
        """Describe the commands ensure_ready() would run.

        Returns:
            List of (description, command line) pairs.
        """

    def ensure_ready(self, tools: list[str]) -> None:
        """Install or update the package manager, then install the tools.

        Args:
            tools: Auxiliary tools to install, in order.

        Raises:
            CommandFailedError: If any command fails.
        """
        if self.is_available():
            logger.info("%s found, updating", self.name)
            self.update()
        else:
            logger.info("%s not found, bootstrapping", self.name)
            self.bootstrap()

        for tool in tools:
            self.install(tool)
