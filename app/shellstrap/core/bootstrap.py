"""Bootstrap pipeline.

Runs the five bootstrap stages in order:

1. Preflight: check the installer backend and the destination.
2. Package manager: install or update it, then install git and gh.
3. Repository: authenticate, clone, record the location.
4. Profiles: wire each PowerShell runtime's startup file.
5. Applications: run the repository's declared install command.

Every stage blocks until its commands exit. The first error aborts the
run; nothing is rolled back.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from shellstrap.core.apps import install_applications
from shellstrap.core.config import BootstrapConfig
from shellstrap.core.environment import EnvironmentStore, get_environment_store
from shellstrap.core.manifest import get_app_manifest_path, load_app_manifest
from shellstrap.core.paths import check_destination, resolve_destination
from shellstrap.core.profile import get_runtimes, has_entry_script, import_line, wire_profiles
from shellstrap.core.repository import HostingClient, acquire_repository
from shellstrap.installers import Installer, get_installer
from shellstrap.models.request import BootstrapRequest
from shellstrap.models.result import BootstrapResult, PlannedStep, Stage

logger = logging.getLogger(__name__)

StageCallback = Callable[[Stage, str], None]


def _notify(on_stage: StageCallback | None, stage: Stage, message: str) -> None:
    logger.info("[%s] %s", stage.value, message)
    if on_stage is not None:
        on_stage(stage, message)


def preflight(request: BootstrapRequest, installer: Installer) -> Path:
    """Validate the request and resolve the destination.

    Performs no mutation and spawns no process.

    Args:
        request: The bootstrap request.
        installer: Installer backend for the request.

    Returns:
        Absolute normalized destination path.

    Raises:
        InstallerNotImplementedError: If the installer has no backend.
        DestinationConflictError: If the destination already exists.
    """
    installer.check_supported()
    check_destination(request.destination)
    return resolve_destination(request.destination)


def run_bootstrap(
    request: BootstrapRequest,
    config: BootstrapConfig,
    *,
    installer: Installer | None = None,
    client: HostingClient | None = None,
    store: EnvironmentStore | None = None,
    on_stage: StageCallback | None = None,
) -> BootstrapResult:
    """Run a complete bootstrap.

    Args:
        request: The bootstrap request.
        config: Bootstrap configuration.
        installer: Installer backend. Defaults to the request's choice.
        client: Hosting CLI wrapper. Defaults to ``gh``.
        store: Environment store. Defaults to the configured backend.
        on_stage: Called with (stage, message) as each stage starts.

    Returns:
        BootstrapResult describing what was done.

    Raises:
        BootstrapError: On the first fatal failure.
    """
    installer = installer or get_installer(request.installer, shell=config.app_shell)
    client = client or HostingClient()
    store = store or get_environment_store(config.environment_backend, shell=config.app_shell)

    _notify(on_stage, Stage.PREFLIGHT, f"Checking destination {request.destination}")
    destination = preflight(request, installer)
    result = BootstrapResult(destination=destination)

    _notify(on_stage, Stage.PACKAGE_MANAGER, f"Preparing {installer.name}")
    installer.ensure_ready(config.tools)

    _notify(on_stage, Stage.REPOSITORY, f"Cloning {request.repository} into {destination}")
    result.marker = acquire_repository(
        client, request.repository, destination, store, config.env_var
    )

    _notify(on_stage, Stage.PROFILES, "Wiring shell profiles")
    if not has_entry_script(destination, config.entry_script):
        logger.warning(
            "%s has no %s; profiles will reference a missing script",
            request.repository,
            config.entry_script,
        )
    result.profiles = wire_profiles(
        destination, get_runtimes(config.shell_runtimes), config.entry_script
    )

    _notify(on_stage, Stage.APPLICATIONS, f"Installing {request.preset.value} applications")
    manifest = load_app_manifest(destination, config.manifest_filename)
    result.app_exit_code = install_applications(
        manifest,
        config.app_shell,
        destination,
        request.installer.value,
        request.preset.value,
        entry_script=config.entry_script,
        env={config.env_var: str(destination)},
        strict=config.strict_app_install,
    )

    return result


def plan_bootstrap(
    request: BootstrapRequest,
    config: BootstrapConfig,
    *,
    installer: Installer | None = None,
    client: HostingClient | None = None,
) -> list[PlannedStep]:
    """Describe the steps a bootstrap would perform, without running them.

    Preflight checks still run, so a dry run fails the same way a real
    run would before any mutation.

    Raises:
        InstallerNotImplementedError: If the installer has no backend.
        DestinationConflictError: If the destination already exists.
    """
    installer = installer or get_installer(request.installer, shell=config.app_shell)
    client = client or HostingClient()

    destination = preflight(request, installer)
    steps = [PlannedStep(Stage.PREFLIGHT, f"Destination resolves to {destination}")]

    for description, command in installer.planned_commands(config.tools):
        steps.append(PlannedStep(Stage.PACKAGE_MANAGER, description, command))

    steps.extend(
        [
            PlannedStep(Stage.REPOSITORY, "Log in to GitHub if needed", "gh auth status"),
            PlannedStep(
                Stage.REPOSITORY,
                f"Clone {request.repository}",
                client.describe_clone(request.repository, destination),
            ),
            PlannedStep(
                Stage.REPOSITORY,
                f"Set {config.env_var}={destination} unless already set",
            ),
        ]
    )

    line = import_line(destination, config.entry_script)
    for runtime in get_runtimes(config.shell_runtimes):
        steps.append(PlannedStep(Stage.PROFILES, f"Add '{line}' to the {runtime.name} profile"))

    manifest_path = get_app_manifest_path(destination, config.manifest_filename)
    steps.append(
        PlannedStep(
            Stage.APPLICATIONS,
            f"Run the {request.installer.value} command declared in {manifest_path} "
            f"with -Preset {request.preset.value}",
        )
    )
    return steps
