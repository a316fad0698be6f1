"""Config commands.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import typer
from rich.table import Table

from shellstrap.cli.types import get_config_path, require_config
from shellstrap.core.config import ConfigError, get_default_config, save_config
from shellstrap.core.paths import get_config_path as get_default_config_path
from shellstrap.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize shellstrap configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration.

    Values come from the config file where set, defaults otherwise.
    """
    config = require_config(ctx)
    path = get_config_path(ctx) or get_default_config_path()

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value")

    for name, value in config.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(name, str(value))

    console.print(table)
    if path.exists():
        print_info(f"Loaded from {path}")
    else:
        print_info(f"No config file at {path}; showing defaults.")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write the default configuration to the config file."""
    path = get_config_path(ctx) or get_default_config_path()

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written: {saved}")
