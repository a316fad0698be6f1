"""Data models for shellstrap.

This module exports the core data structures used throughout the application.
"""

from shellstrap.models.manifest import AppManifest, AppManifestMeta, InstallerEntry
from shellstrap.models.request import (
    DEFAULT_DESTINATION,
    BootstrapRequest,
    InstallerChoice,
    PresetChoice,
)
from shellstrap.models.result import (
    BootstrapResult,
    MarkerResult,
    PlannedStep,
    ProfileWiringResult,
    Stage,
)

__all__ = [
    "DEFAULT_DESTINATION",
    "AppManifest",
    "AppManifestMeta",
    "BootstrapRequest",
    "BootstrapResult",
    "InstallerChoice",
    "InstallerEntry",
    "MarkerResult",
    "PlannedStep",
    "PresetChoice",
    "ProfileWiringResult",
    "Stage",
]
