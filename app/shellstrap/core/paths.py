"""XDG-compliant path management for shellstrap.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and state storage, plus the destination
path helpers used by the bootstrap preflight.

XDG defaults:
- Config: ~/.config/shellstrap/
- State: ~/.local/state/shellstrap/
"""

import os
from pathlib import Path

from shellstrap.core.errors import DestinationConflictError

# Application identifier for directory naming
APP_NAME = "shellstrap"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/shellstrap/ (or XDG_CONFIG_HOME/shellstrap/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    Returns:
        Path to ~/.local/state/shellstrap/ (or XDG_STATE_HOME/shellstrap/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/shellstrap/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_environment_file_path() -> Path:
    """Get the file used to persist environment markers off Windows.

    Returns:
        Path to ~/.local/state/shellstrap/environment.toml.
    """
    return get_state_dir() / "environment.toml"


# =============================================================================
# Bootstrap destination
# =============================================================================


def resolve_destination(destination: str) -> Path:
    """Resolve a destination to an absolute, normalized path.

    A leading ``~`` is expanded. The path does not need to exist and
    symlinks are not followed.

    Args:
        destination: Destination path, possibly relative to the working directory.

    Returns:
        Absolute normalized path.
    """
    return Path(os.path.abspath(os.path.expanduser(destination)))


def check_destination(destination: str) -> None:
    """Refuse to bootstrap into a path that already exists.

    The check is made on the same path resolve_destination() returns, so
    ``~/scripts`` and ``./scripts`` are checked where they will be cloned.

    Args:
        destination: Destination path, possibly relative.

    Raises:
        DestinationConflictError: If anything exists at the destination.
    """
    path = resolve_destination(destination)
    if os.path.lexists(path):
        raise DestinationConflictError(f"Destination already exists: {path}")
