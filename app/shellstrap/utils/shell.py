"""Shell execution utilities.

Provides subprocess execution for the external tools shellstrap drives
(package managers, the hosting CLI and PowerShell runtimes).
"""

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    timeout: float | None = None,
) -> CommandResult:
    """Execute a command, capture its output and return the result.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait. None waits indefinitely.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    logger.info("Running: %s", format_command(args))
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    if result.stderr:
        logger.debug("stderr: %s", result.stderr.strip())
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_interactive(
    args: list[str],
    *,
    cwd: str | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Execute a command interactively, inheriting the terminal.

    Unlike run_command(), this does NOT capture stdout/stderr, so the
    child can prompt the user (e.g. ``gh auth login``) and stream its
    progress directly. Blocks until the child exits.

    Args:
        args: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Additional environment variables (merged with current env).

    Returns:
        Exit code of the command.

    Raises:
        FileNotFoundError: If command executable is not found.
        OSError: If command cannot be executed.
    """
    logger.info("Running (interactive): %s", format_command(args))
    full_env = {**os.environ, **(env or {})}
    result = subprocess.run(
        args,
        check=False,
        cwd=cwd,
        env=full_env,
    )
    return result.returncode


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def resolve_executable(name: str) -> str:
    """Return the full path of an executable, or the bare name if not found.

    On Windows, tools such as scoop are ``.cmd``/``.ps1`` shims that
    CreateProcess cannot find by bare name; the PATH lookup resolves them.
    """
    return shutil.which(name) or name


def prepend_path(directory: str) -> bool:
    """Put a directory at the front of this process's PATH.

    Installers that add themselves to the user PATH only affect new
    sessions. This makes their executables visible to later lookups and
    child processes of the running one.

    Args:
        directory: Directory to add.

    Returns:
        True if PATH changed, False if the directory was already on it.
    """
    wanted = os.path.normcase(os.path.normpath(directory))
    parts = [p for p in os.environ.get("PATH", "").split(os.pathsep) if p]
    if any(os.path.normcase(os.path.normpath(p)) == wanted for p in parts):
        return False
    os.environ["PATH"] = os.pathsep.join([directory, *parts])
    logger.debug("Added %s to PATH", directory)
    return True


def format_command(args: list[str]) -> str:
    """Render an argument list as a single display string."""
    return subprocess.list2cmdline(args)


def powershell_quote(value: str) -> str:
    """Quote a value as a PowerShell single-quoted string literal."""
    return "'" + value.replace("'", "''") + "'"
