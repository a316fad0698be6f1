"""Application installation.

Runs the install command a profile repository declares for the chosen
installer and preset, in a new PowerShell process that dot-sources the
repository's entry script first.
"""

import logging
from pathlib import Path

from shellstrap.core.config import DEFAULT_ENTRY_SCRIPT
from shellstrap.core.errors import CommandFailedError, ToolNotFoundError
from shellstrap.models.manifest import AppManifest
from shellstrap.utils.shell import (
    powershell_quote,
    resolve_executable,
    run_interactive,
)

logger = logging.getLogger(__name__)


def build_install_args(
    shell: str,
    repo_path: Path,
    command: str,
    preset: str,
    entry_script: str = DEFAULT_ENTRY_SCRIPT,
) -> list[str]:
    """Build the child shell command line for an application install.

    The child starts without a profile and dot-sources the entry script
    explicitly, so it does not depend on profile wiring having succeeded.
    """
    script_path = f"{repo_path}\\{entry_script}"
    script = f". {powershell_quote(script_path)}; {command} -Preset {powershell_quote(preset)}"
    return [
        resolve_executable(shell),
        "-NoLogo",
        "-NoProfile",
        "-ExecutionPolicy",
        "Bypass",
        "-Command",
        script,
    ]


def install_applications(
    manifest: AppManifest,
    shell: str,
    repo_path: Path,
    installer: str,
    preset: str,
    *,
    entry_script: str = DEFAULT_ENTRY_SCRIPT,
    env: dict[str, str] | None = None,
    strict: bool = False,
) -> int:
    """Run the declared install command for a preset in a child shell.

    Blocks until the child exits.

    Args:
        manifest: The repository's application manifest.
        shell: PowerShell executable for the child process.
        repo_path: Root of the cloned repository.
        installer: Installer name to look up in the manifest.
        preset: Preset passed to the install command.
        entry_script: Entry script filename.
        env: Extra environment variables for the child.
        strict: Raise on a non-zero exit instead of returning the code.

    Returns:
        Exit code of the child process.

    Raises:
        PresetUnsupportedError: If the manifest lacks the installer/preset.
        CommandFailedError: If strict and the child exits non-zero.
        ToolNotFoundError: If the shell cannot be executed.
    """
    entry = manifest.entry_for(installer, preset)
    args = build_install_args(shell, repo_path, entry.command, preset, entry_script)

    logger.info("Installing %s applications with %s", preset, entry.command)
    try:
        returncode = run_interactive(args, cwd=str(repo_path), env=env)
    except OSError as e:
        msg = f"Cannot run {shell} to install applications: {e}"
        raise ToolNotFoundError(msg) from e

    if returncode != 0:
        if strict:
            raise CommandFailedError(f"Installing {preset} applications", returncode)
        logger.warning("%s exited with code %d", entry.command, returncode)

    return returncode
