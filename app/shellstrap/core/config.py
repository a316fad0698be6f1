"""Bootstrap configuration and settings.

This module provides the configuration model and I/O functions for
shellstrap. Every setting has a default, so a missing config file is not
an error.

Configuration is stored in ~/.config/shellstrap/config.toml
"""

import tomllib
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shellstrap.core.errors import BootstrapError
from shellstrap.core.paths import get_config_path
from shellstrap.utils.files import write_toml_atomic

EnvironmentBackend = Literal["auto", "user", "file"]

DEFAULT_ENV_VAR = "SCRIPT_REPO_ROOT"
DEFAULT_ENTRY_SCRIPT = "profile.ps1"
DEFAULT_MANIFEST_FILENAME = "shellstrap.toml"


class BootstrapConfig(BaseModel):
    """Configuration for a bootstrap run.

    Attributes:
        env_var: User environment variable that records the repository path.
        entry_script: Entry script filename at the repository root.
        manifest_filename: Application manifest filename at the repository root.
        tools: Auxiliary tools installed through the package manager.
        shell_runtimes: PowerShell executables whose profiles are wired.
        app_shell: PowerShell executable used to run the application install.
        strict_app_install: Fail the run if the application install exits non-zero.
        environment_backend: Where the environment marker is stored
            ("user" = Windows user environment, "file" = state file,
            "auto" = user on Windows, file elsewhere).
    """

    model_config = ConfigDict(extra="forbid")

    env_var: Annotated[
        str,
        Field(min_length=1, pattern=r"^[A-Za-z_][A-Za-z0-9_]*$"),
    ] = DEFAULT_ENV_VAR
    entry_script: Annotated[str, Field(min_length=1)] = DEFAULT_ENTRY_SCRIPT
    manifest_filename: Annotated[str, Field(min_length=1)] = DEFAULT_MANIFEST_FILENAME
    tools: list[str] = Field(default_factory=lambda: ["git", "gh"])
    shell_runtimes: list[str] = Field(
        default_factory=lambda: ["powershell", "pwsh"],
        min_length=1,
    )
    app_shell: Annotated[str, Field(min_length=1)] = "powershell"
    strict_app_install: bool = False
    environment_backend: EnvironmentBackend = "auto"

    @field_validator("entry_script", "manifest_filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Ensure repository-relative names are bare filenames."""
        if "/" in v or "\\" in v:
            msg = f"must be a filename, not a path: '{v}'"
            raise ValueError(msg)
        return v


class ConfigError(BootstrapError):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def get_default_config() -> BootstrapConfig:
    """Get the default bootstrap configuration."""
    return BootstrapConfig()


def load_config(path: Path | None = None) -> BootstrapConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated BootstrapConfig. Defaults if the file doesn't exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file can't be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return get_default_config()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return BootstrapConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: BootstrapConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Args:
        config: The BootstrapConfig to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    try:
        return write_toml_atomic(config.model_dump(), config_path)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e
