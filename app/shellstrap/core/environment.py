"""Persistent user environment stores.

The bootstrap records where the profile repository lives in a user-scoped
environment variable. Stores are injected into the pipeline so the
bootstrap logic never touches the real user environment in tests.
"""

import logging
import subprocess
import sys
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path

from shellstrap.core.errors import BootstrapError, CommandFailedError
from shellstrap.core.paths import get_environment_file_path
from shellstrap.models.result import MarkerResult
from shellstrap.utils.files import write_toml_atomic
from shellstrap.utils.shell import powershell_quote, resolve_executable, run_command

logger = logging.getLogger(__name__)


class EnvironmentStoreError(BootstrapError):
    """Raised when an environment store cannot be read or written."""


class EnvironmentStore(ABC):
    """Abstract base class for persistent environment variable stores.

    Example:
        >>> store = FileEnvironmentStore(Path("/tmp/env.toml"))
        >>> store.get_or_set_once("SCRIPT_REPO_ROOT", "/home/alice/scripts").written
        True
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable location of the store."""

    @abstractmethod
    def get(self, name: str) -> str | None:
        """Return the stored value, or None if the variable is unset or empty."""

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Persist a value for the variable."""

    def get_or_set_once(self, name: str, value: str) -> MarkerResult:
        """Set the variable only if it has no value yet.

        The first writer wins: an existing value is left untouched and
        returned, even if it differs from ``value``.

        Args:
            name: Variable name.
            value: Value to store if the variable is unset.

        Returns:
            MarkerResult with the effective value and whether it was written.
        """
        existing = self.get(name)
        if existing:
            logger.info("%s already set in %s, keeping %s", name, self.description, existing)
            return MarkerResult(name=name, value=existing, written=False)

        self.set(name, value)
        logger.info("Set %s=%s in %s", name, value, self.description)
        return MarkerResult(name=name, value=value, written=True)


class UserEnvironmentStore(EnvironmentStore):
    """Windows user-scoped environment, accessed through PowerShell.

    Uses ``[Environment]::Get/SetEnvironmentVariable(name, value, 'User')``,
    which persists to HKCU\\Environment and survives the process.
    """

    def __init__(self, shell: str = "powershell") -> None:
        self._shell = shell

    @property
    def description(self) -> str:
        """Return the store location."""
        return "user environment"

    def _run(self, script: str, step: str) -> str:
        args = [resolve_executable(self._shell), "-NoLogo", "-NoProfile", "-Command", script]
        try:
            result = run_command(args, timeout=30.0)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise EnvironmentStoreError(f"{step}: cannot run {self._shell}: {e}") from e
        if not result.success:
            raise CommandFailedError(step, result.returncode, result.stderr.strip() or None)
        return result.stdout

    def get(self, name: str) -> str | None:
        """Read a user-scoped variable."""
        script = f"[Environment]::GetEnvironmentVariable({powershell_quote(name)}, 'User')"
        value = self._run(script, f"Reading {name}").strip()
        return value or None

    def set(self, name: str, value: str) -> None:
        """Write a user-scoped variable."""
        script = (
            f"[Environment]::SetEnvironmentVariable("
            f"{powershell_quote(name)}, {powershell_quote(value)}, 'User')"
        )
        self._run(script, f"Setting {name}")


class FileEnvironmentStore(EnvironmentStore):
    """Environment variables persisted to a TOML file.

    Used where no user environment registry exists. File layout::

        [variables]
        SCRIPT_REPO_ROOT = "/home/alice/scripts"
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else get_environment_file_path()

    @property
    def path(self) -> Path:
        """Path of the backing file."""
        return self._path

    @property
    def description(self) -> str:
        """Return the store location."""
        return str(self._path)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise EnvironmentStoreError(f"Invalid TOML syntax in {self._path}: {e}") from e
        except OSError as e:
            raise EnvironmentStoreError(f"Failed to read {self._path}: {e}") from e

        variables = data.get("variables", {})
        if not isinstance(variables, dict):
            raise EnvironmentStoreError(f"Invalid 'variables' section in {self._path}")
        return {str(k): str(v) for k, v in variables.items()}

    def get(self, name: str) -> str | None:
        """Read a variable from the file."""
        return self._load().get(name) or None

    def set(self, name: str, value: str) -> None:
        """Write a variable to the file, keeping the others."""
        variables = self._load()
        variables[name] = value
        try:
            write_toml_atomic({"variables": variables}, self._path)
        except OSError as e:
            raise EnvironmentStoreError(f"Failed to write {self._path}: {e}") from e


def get_environment_store(backend: str = "auto", shell: str = "powershell") -> EnvironmentStore:
    """Create the environment store for a configured backend.

    Args:
        backend: "user", "file" or "auto" (user on Windows, file elsewhere).
        shell: PowerShell executable used by the user backend.

    Returns:
        EnvironmentStore instance.
    """
    if backend == "auto":
        backend = "user" if sys.platform == "win32" else "file"
    if backend == "user":
        return UserEnvironmentStore(shell=shell)
    return FileEnvironmentStore()
