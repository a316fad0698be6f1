"""Bootstrap command implementation.

Sets up a machine from a profile repository: package manager, git and gh,
clone, shell profiles and applications.
"""

from typing import Annotated

import typer
from pydantic import ValidationError

from shellstrap.cli.display import (
    create_plan_table,
    create_profiles_table,
    print_bootstrap_summary,
)
from shellstrap.cli.types import require_config
from shellstrap.core.bootstrap import plan_bootstrap, run_bootstrap
from shellstrap.core.errors import BootstrapError
from shellstrap.models.request import (
    DEFAULT_DESTINATION,
    BootstrapRequest,
    InstallerChoice,
    PresetChoice,
)
from shellstrap.models.result import Stage
from shellstrap.utils.formatting import (
    console,
    print_error,
    print_info,
    print_stage,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Bootstrap this machine from a profile repository.",
    invoke_without_command=True,
)

_STAGES = list(Stage)


def _print_stage(stage: Stage, message: str) -> None:
    print_stage(_STAGES.index(stage) + 1, len(_STAGES), message)


@app.callback(invoke_without_command=True)
def bootstrap(
    ctx: typer.Context,
    repo: Annotated[
        str,
        typer.Option(
            "--repo",
            "-r",
            help="Profile repository on GitHub (owner/name).",
        ),
    ],
    dest: Annotated[
        str,
        typer.Option(
            "--dest",
            "-d",
            help="Clone destination. Must not exist yet.",
        ),
    ] = DEFAULT_DESTINATION,
    installer: Annotated[
        InstallerChoice,
        typer.Option(
            "--installer",
            "-i",
            help="Package manager to bootstrap.",
            case_sensitive=False,
        ),
    ] = InstallerChoice.SCOOP,
    preset: Annotated[
        PresetChoice,
        typer.Option(
            "--preset",
            "-p",
            help="Application preset to install.",
            case_sensitive=False,
        ),
    ] = PresetChoice.MINIMAL,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Fail if the application install exits non-zero (default from config).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show what would be done without running anything.",
        ),
    ] = False,
) -> None:
    """Bootstrap this machine from a profile repository.

    Installs or updates scoop, installs git and gh, clones the repository,
    adds its profile.ps1 to the PowerShell profiles and installs the
    applications of the chosen preset.

    Examples:
        shellstrap bootstrap --repo alice/dotfiles
        shellstrap bootstrap -r alice/dotfiles -d ~/scripts --preset full
        shellstrap bootstrap -r alice/dotfiles --dry-run
    """
    if ctx.invoked_subcommand is not None:
        return

    config = require_config(ctx)
    if strict is not None:
        config = config.model_copy(update={"strict_app_install": strict})

    try:
        request = BootstrapRequest.create(repo, dest, installer, preset)
    except ValidationError as e:
        print_error(f"Invalid arguments: {e}")
        raise typer.Exit(code=1) from e

    try:
        if dry_run:
            steps = plan_bootstrap(request, config)
            console.print(create_plan_table(steps))
            print_info("[DRY-RUN] Nothing was executed.")
            return

        result = run_bootstrap(request, config, on_stage=_print_stage)
    except BootstrapError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print()
    console.print(create_profiles_table(result.profiles))
    print_bootstrap_summary(result)

    if any(p.skipped for p in result.profiles):
        print_warning("Some shell runtimes were skipped; run 'shellstrap wire' after installing them.")

    print_success("Bootstrap complete. Open a new shell to load your profile.")
