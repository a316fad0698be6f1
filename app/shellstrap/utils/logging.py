"""Logging setup for the CLI.

Modules log through ``logging.getLogger(__name__)``; this installs a
single Rich handler on the root logger that writes to stderr.
"""

import logging

from rich.logging import RichHandler

from shellstrap.utils.formatting import err_console


def get_log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map CLI verbosity flags to a logging level."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging for a CLI run.

    Calling it again replaces the handler installed by a previous call
    instead of adding a second one.

    Args:
        verbose: Log everything, including each external command.
        quiet: Only log errors.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_shellstrap", False):
            root.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_path=False,
        show_time=verbose,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._shellstrap = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(get_log_level(verbose, quiet))
