"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from shellstrap import __version__
from shellstrap.cli.commands import bootstrap, config, wire
from shellstrap.utils.logging import setup_logging

# Create main Typer app
app = typer.Typer(
    name="shellstrap",
    help="Bootstrap a Windows machine from a profile repository.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"shellstrap version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output, including every external command.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file (default: ~/.config/shellstrap/config.toml).",
        ),
    ] = None,
) -> None:
    """shellstrap - bootstrap a Windows machine from a profile repository.

    Installs scoop, git and gh, clones your profile repository, wires it
    into your PowerShell profiles and installs your applications.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path


# Register commands
app.add_typer(bootstrap.app, name="bootstrap")
app.add_typer(wire.app, name="wire")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
