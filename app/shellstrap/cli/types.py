"""Shared helpers for CLI commands.

This module provides functions used across multiple CLI command modules
to avoid code duplication.
"""

from pathlib import Path

import typer

from shellstrap.core.config import BootstrapConfig, ConfigError, load_config
from shellstrap.utils.formatting import print_error, print_info


def get_config_path(ctx: typer.Context) -> Path | None:
    """Return the --config path given to the main command, if any."""
    obj = ctx.obj or {}
    return obj.get("config_path")


def require_config(ctx: typer.Context) -> BootstrapConfig:
    """Load configuration or exit with a helpful error message.

    Args:
        ctx: Typer context carrying the global --config option.

    Returns:
        Loaded BootstrapConfig (defaults if no file exists).

    Raises:
        typer.Exit: If the config file cannot be loaded.
    """
    try:
        return load_config(get_config_path(ctx))
    except ConfigError as e:
        print_error(str(e))
        print_info("Fix the file or run 'shellstrap config init --force' to reset it.")
        raise typer.Exit(code=1) from e
