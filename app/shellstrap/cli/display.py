"""Shared Rich display functions for plans and results.

Provides table builders used by the bootstrap and wire commands.
"""

from rich.markup import escape
from rich.table import Table

from shellstrap.models.result import BootstrapResult, PlannedStep, ProfileWiringResult
from shellstrap.utils.formatting import console


def create_plan_table(steps: list[PlannedStep]) -> Table:
    """Create a Rich table displaying planned bootstrap steps.

    Args:
        steps: Steps produced by plan_bootstrap().

    Returns:
        Rich Table configured for plan display.
    """
    table = Table(
        title="Bootstrap Plan (Dry Run)",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Stage", style="stage", no_wrap=True)
    table.add_column("Step")
    table.add_column("Command", style="command", overflow="fold")

    for step in steps:
        table.add_row(step.stage.value, step.description, step.command or "")

    return table


def create_profiles_table(results: list[ProfileWiringResult]) -> Table:
    """Create a Rich table displaying profile wiring outcomes.

    Args:
        results: One result per shell runtime.

    Returns:
        Rich Table configured for profile display.
    """
    table = Table(
        title="Shell Profiles",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Runtime", no_wrap=True)
    table.add_column("Profile")

    for result in results:
        if result.skipped:
            status = "[skipped]SKIP[/skipped]"
            detail = f"[muted]{escape(result.error or '')}[/muted]"
        elif result.added:
            status = "[success]ADDED[/success]"
            detail = escape(str(result.profile_path))
        else:
            status = "[muted]OK[/muted]"
            detail = f"{escape(str(result.profile_path))} [muted](already wired)[/muted]"
        table.add_row(status, result.runtime, detail)

    return table


def print_bootstrap_summary(result: BootstrapResult) -> None:
    """Print the outcome of a bootstrap run.

    Args:
        result: The completed run's result.
    """
    console.print()
    console.print("[bold]Bootstrap Summary[/bold]")
    console.print(f"  Repository: [info]{escape(str(result.destination))}[/info]")

    if result.marker is not None:
        if result.marker.written:
            console.print(f"  {result.marker.name}: [success]set[/success]")
        else:
            kept = escape(result.marker.value)
            console.print(f"  {result.marker.name}: [muted]kept existing value {kept}[/muted]")

    console.print(f"  Profiles wired: [bold]{result.wired_count}/{len(result.profiles)}[/bold]")

    if result.app_exit_code is not None:
        if result.app_exit_code == 0:
            console.print("  Applications: [success]installed[/success]")
        else:
            console.print(
                f"  Applications: [warning]installer exited with code {result.app_exit_code}[/warning]"
            )
    console.print()
