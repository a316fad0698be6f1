"""Application manifest models.

The cloned profile repository declares, in ``shellstrap.toml`` at its
root, which installers it supports, the command each one runs and the
presets that command accepts::

    [meta]
    version = "1.0"

    [installers.scoop]
    command = "Install-ScoopApps"
    presets = ["minimal", "full"]
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shellstrap.core.errors import PresetUnsupportedError


class AppManifestMeta(BaseModel):
    """Metadata section of the application manifest."""

    model_config = ConfigDict(extra="forbid")

    version: str = "1.0"


class InstallerEntry(BaseModel):
    """Install command declared for one package manager.

    Attributes:
        command: PowerShell command defined by the entry script. It is
            invoked as ``<command> -Preset <preset>``.
        presets: Preset names the command accepts.
    """

    model_config = ConfigDict(extra="forbid")

    command: Annotated[str, Field(min_length=1)]
    presets: Annotated[list[str], Field(min_length=1)]

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Reject commands that are not a single PowerShell command name."""
        command = v.strip()
        if not command or any(ch.isspace() or ch in ";|&`$" for ch in command):
            msg = f"command must be a single PowerShell command name, got '{v}'"
            raise ValueError(msg)
        return command


class AppManifest(BaseModel):
    """Capabilities declared by a profile repository.

    Attributes:
        meta: Manifest metadata.
        installers: Mapping of installer name to its install entry.
    """

    model_config = ConfigDict(extra="forbid")

    meta: AppManifestMeta = Field(default_factory=AppManifestMeta)
    installers: dict[str, InstallerEntry] = Field(default_factory=dict)

    def entry_for(self, installer: str, preset: str) -> InstallerEntry:
        """Return the install entry for an installer, checking the preset.

        Args:
            installer: Installer name (e.g. "scoop").
            preset: Preset name (e.g. "minimal").

        Returns:
            The matching InstallerEntry.

        Raises:
            PresetUnsupportedError: If the installer is not declared or does
                not list the preset.
        """
        entry = self.installers.get(installer)
        if entry is None:
            declared = ", ".join(sorted(self.installers)) or "none"
            msg = f"Repository declares no install command for '{installer}' (declared: {declared})"
            raise PresetUnsupportedError(msg)
        if preset not in entry.presets:
            msg = (
                f"Installer '{installer}' does not support preset '{preset}' "
                f"(supported: {', '.join(entry.presets)})"
            )
            raise PresetUnsupportedError(msg)
        return entry
