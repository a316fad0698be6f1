"""Application manifest file I/O.

This module loads the ``shellstrap.toml`` manifest a profile repository
uses to declare its install commands, validating it with Pydantic models.
"""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from shellstrap.core.config import DEFAULT_MANIFEST_FILENAME
from shellstrap.core.errors import BootstrapError
from shellstrap.models.manifest import AppManifest


class AppManifestError(BootstrapError):
    """Base exception for application manifest errors."""


class AppManifestNotFoundError(AppManifestError):
    """Raised when the repository has no application manifest."""


class AppManifestParseError(AppManifestError):
    """Raised when the manifest file cannot be parsed."""


class AppManifestValidationError(AppManifestError):
    """Raised when manifest content is invalid."""


def get_app_manifest_path(repo_path: Path, filename: str = DEFAULT_MANIFEST_FILENAME) -> Path:
    """Return the manifest path inside a repository."""
    return repo_path / filename


def load_app_manifest(repo_path: Path, filename: str = DEFAULT_MANIFEST_FILENAME) -> AppManifest:
    """Load and validate a repository's application manifest.

    Args:
        repo_path: Root of the cloned repository.
        filename: Manifest filename at the repository root.

    Returns:
        Validated AppManifest object.

    Raises:
        AppManifestNotFoundError: If the manifest file doesn't exist.
        AppManifestParseError: If the TOML syntax is invalid.
        AppManifestValidationError: If the content doesn't match the schema.
    """
    manifest_path = get_app_manifest_path(repo_path, filename)

    if not manifest_path.exists():
        msg = (
            f"Application manifest not found: {manifest_path}. "
            f"The repository must declare its install commands in {filename}."
        )
        raise AppManifestNotFoundError(msg)

    try:
        with open(manifest_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise AppManifestParseError(f"Invalid TOML syntax in {manifest_path}: {e}") from e
    except OSError as e:
        raise AppManifestError(f"Failed to read application manifest: {e}") from e

    try:
        return AppManifest.model_validate(data)
    except ValidationError as e:
        raise AppManifestValidationError(f"Invalid application manifest content: {e}") from e
