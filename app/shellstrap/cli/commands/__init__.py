"""CLI commands for shellstrap.

This package contains all subcommand implementations.
"""

from shellstrap.cli.commands import bootstrap, config, wire

__all__ = ["bootstrap", "config", "wire"]
