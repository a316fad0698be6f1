"""Result models for bootstrap runs.

This module defines the data structures describing what a bootstrap run
did (or, for a dry run, would do).
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Stage(Enum):
    """Bootstrap pipeline stages, in execution order."""

    PREFLIGHT = "preflight"
    PACKAGE_MANAGER = "package-manager"
    REPOSITORY = "repository"
    PROFILES = "profiles"
    APPLICATIONS = "applications"


@dataclass(frozen=True, slots=True)
class PlannedStep:
    """A single step a bootstrap run would perform.

    Attributes:
        stage: Pipeline stage the step belongs to.
        description: What the step does.
        command: Command line that would be executed, if any.
    """

    stage: Stage
    description: str
    command: str | None = None


@dataclass(frozen=True, slots=True)
class ProfileWiringResult:
    """Outcome of wiring one shell runtime's startup file.

    Attributes:
        runtime: Name of the shell runtime.
        profile_path: Startup file path, or None if it could not be resolved.
        added: True if the import line was appended, False if already present.
        error: Reason the runtime was skipped, if it was.
    """

    runtime: str
    profile_path: Path | None = None
    added: bool = False
    error: str | None = None

    @property
    def skipped(self) -> bool:
        """Check if this runtime was skipped."""
        return self.error is not None


@dataclass(frozen=True, slots=True)
class MarkerResult:
    """Outcome of recording the repository location.

    Attributes:
        name: Environment variable name.
        value: Value the variable holds after the run.
        written: True if this run set it, False if a previous value was kept.
    """

    name: str
    value: str
    written: bool


@dataclass(slots=True)
class BootstrapResult:
    """Summary of a completed bootstrap run."""

    destination: Path
    marker: MarkerResult | None = None
    profiles: list[ProfileWiringResult] = field(default_factory=list)
    app_exit_code: int | None = None

    @property
    def wired_count(self) -> int:
        """Number of startup files that reference the repository."""
        return sum(1 for p in self.profiles if not p.skipped)
