"""Wire command implementation.

Adds an already-cloned profile repository to the PowerShell profiles.
Safe to run repeatedly.
"""

from pathlib import Path
from typing import Annotated

import typer

from shellstrap.cli.display import create_profiles_table
from shellstrap.cli.types import require_config
from shellstrap.core.environment import get_environment_store
from shellstrap.core.errors import BootstrapError
from shellstrap.core.paths import resolve_destination
from shellstrap.core.profile import get_runtimes, has_entry_script, wire_profiles
from shellstrap.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Add a cloned profile repository to the shell profiles.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def wire(
    ctx: typer.Context,
    repo_path: Annotated[
        Path | None,
        typer.Option(
            "--repo-path",
            "-p",
            help="Cloned repository (default: the recorded repository location).",
        ),
    ] = None,
) -> None:
    """Add a cloned profile repository to the PowerShell profiles.

    Each runtime's profile gets one dot-source line for the repository's
    entry script. Profiles that already have it are left unchanged.

    Examples:
        shellstrap wire                       # Use the recorded location
        shellstrap wire --repo-path ~/scripts
    """
    if ctx.invoked_subcommand is not None:
        return

    config = require_config(ctx)

    try:
        if repo_path is None:
            store = get_environment_store(config.environment_backend, shell=config.app_shell)
            recorded = store.get(config.env_var)
            if recorded is None:
                print_error(f"{config.env_var} is not set.")
                print_info("Pass --repo-path or run 'shellstrap bootstrap' first.")
                raise typer.Exit(code=1)
            resolved = Path(recorded)
        else:
            resolved = resolve_destination(str(repo_path))

        if not has_entry_script(resolved, config.entry_script):
            print_error(f"No {config.entry_script} found in {resolved}")
            raise typer.Exit(code=1)

        results = wire_profiles(resolved, get_runtimes(config.shell_runtimes), config.entry_script)
    except BootstrapError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(create_profiles_table(results))

    if all(r.skipped for r in results):
        print_error("No shell runtime could be wired.")
        raise typer.Exit(code=1)

    print_success(f"Shell profiles reference {resolved}")
