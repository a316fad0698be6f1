"""Repository acquisition through the GitHub CLI.

Authenticates with the hosting service if needed, clones the profile
repository and records its location in the environment store.
"""

import logging
from pathlib import Path

from shellstrap.core.environment import EnvironmentStore
from shellstrap.core.errors import (
    AuthenticationFailedError,
    CloneFailedError,
    CloneIncompleteError,
    ToolNotFoundError,
)
from shellstrap.models.result import MarkerResult
from shellstrap.utils.shell import (
    format_command,
    resolve_executable,
    run_command,
    run_interactive,
)

logger = logging.getLogger(__name__)


class HostingClient:
    """Thin wrapper around the ``gh`` CLI.

    Attributes:
        executable: Name or path of the gh executable.
    """

    def __init__(self, executable: str = "gh") -> None:
        self._executable = executable

    def _args(self, *args: str) -> list[str]:
        return [resolve_executable(self._executable), *args]

    def _run(self, args: list[str]) -> int:
        try:
            return run_interactive(args)
        except OSError as e:
            msg = f"Cannot run {args[0]}: {e}"
            raise ToolNotFoundError(msg) from e

    def is_authenticated(self) -> bool:
        """Check ``gh auth status``. Non-zero exit means not logged in.

        Raises:
            ToolNotFoundError: If gh cannot be executed.
        """
        try:
            result = run_command(self._args("auth", "status"))
        except OSError as e:
            msg = f"Cannot run {self._executable}: {e}"
            raise ToolNotFoundError(msg) from e
        return result.success

    def login(self) -> None:
        """Run the interactive ``gh auth login`` flow.

        Blocks until the user finishes; no timeout is applied.

        Raises:
            AuthenticationFailedError: If login exits non-zero.
        """
        returncode = self._run(self._args("auth", "login"))
        if returncode != 0:
            msg = f"gh auth login failed with exit code {returncode}"
            raise AuthenticationFailedError(msg)

    def clone_args(self, repository: str, destination: Path) -> list[str]:
        """Build the clone command line."""
        return self._args("repo", "clone", repository, str(destination))

    def clone(self, repository: str, destination: Path) -> None:
        """Clone a repository with ``gh repo clone``.

        Raises:
            CloneFailedError: If the clone exits non-zero.
        """
        returncode = self._run(self.clone_args(repository, destination))
        if returncode != 0:
            msg = f"Cloning {repository} failed with exit code {returncode}"
            raise CloneFailedError(msg)

    def describe_clone(self, repository: str, destination: Path) -> str:
        """Render the clone command for display."""
        return format_command(self.clone_args(repository, destination))


def acquire_repository(
    client: HostingClient,
    repository: str,
    destination: Path,
    store: EnvironmentStore,
    env_var: str,
) -> MarkerResult:
    """Authenticate, clone and record the repository location.

    Args:
        client: Hosting CLI wrapper.
        repository: Repository identifier ("owner/name").
        destination: Resolved absolute clone destination.
        store: Environment store for the location marker.
        env_var: Name of the marker variable.

    Returns:
        MarkerResult for the environment marker.

    Raises:
        AuthenticationFailedError: If login is needed and fails.
        CloneFailedError: If the clone command fails.
        CloneIncompleteError: If the destination is missing after cloning.
    """
    if client.is_authenticated():
        logger.info("Already authenticated with gh")
    else:
        logger.info("Not authenticated with gh, starting login")
        client.login()

    client.clone(repository, destination)

    if not destination.exists():
        msg = f"Clone of {repository} reported success but {destination} does not exist"
        raise CloneIncompleteError(msg)

    return store.get_or_set_once(env_var, str(destination))
