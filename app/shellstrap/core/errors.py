"""Exception hierarchy for bootstrap failures.

Every failure the pipeline can raise derives from BootstrapError, so the
CLI can report it with a single handler. None of these are retried.
"""


class BootstrapError(Exception):
    """Base exception for all bootstrap errors."""


class DestinationConflictError(BootstrapError):
    """Raised when the clone destination already exists."""


class InvalidInstallerError(BootstrapError, ValueError):
    """Raised when an installer name is not one of the supported choices."""


class InvalidPresetError(BootstrapError, ValueError):
    """Raised when a preset name is not one of the supported choices."""


class InstallerNotImplementedError(BootstrapError, NotImplementedError):
    """Raised when a known installer backend has no implementation."""


class CommandFailedError(BootstrapError):
    """Raised when an external command exits non-zero.

    Attributes:
        step: Human-readable name of the step that failed.
        returncode: Exit code of the failed command.
    """

    def __init__(self, step: str, returncode: int, detail: str | None = None) -> None:
        self.step = step
        self.returncode = returncode
        self.detail = detail
        message = f"{step} failed with exit code {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AuthenticationFailedError(BootstrapError):
    """Raised when interactive login with the hosting service fails."""


class CloneFailedError(BootstrapError):
    """Raised when the repository clone command exits non-zero."""


class CloneIncompleteError(BootstrapError):
    """Raised when the clone reported success but the destination is missing."""


class ShellRuntimeUnavailableError(BootstrapError):
    """Raised when a shell runtime cannot report its profile path."""


class PresetUnsupportedError(BootstrapError):
    """Raised when the repository does not declare the requested installer/preset."""


class ToolNotFoundError(BootstrapError):
    """Raised when an external tool cannot be executed at all."""


class ProfileWriteError(BootstrapError):
    """Raised when a shell startup file cannot be created or written."""
