"""Bootstrap request model.

A BootstrapRequest is built once from the caller's arguments and is
immutable for the duration of a run.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shellstrap.core.errors import InvalidInstallerError, InvalidPresetError

DEFAULT_DESTINATION = "./scripts"


class InstallerChoice(str, Enum):
    """Package manager backends that can be selected."""

    SCOOP = "scoop"
    WINGET = "winget"

    @classmethod
    def parse(cls, value: "str | InstallerChoice") -> "InstallerChoice":
        """Parse an installer name.

        Raises:
            InvalidInstallerError: If value is not a supported installer.
        """
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            msg = f"Invalid installer '{value}' (expected one of: {choices})"
            raise InvalidInstallerError(msg) from None


class PresetChoice(str, Enum):
    """Application presets that can be installed."""

    MINIMAL = "minimal"
    FULL = "full"

    @classmethod
    def parse(cls, value: "str | PresetChoice") -> "PresetChoice":
        """Parse a preset name.

        Raises:
            InvalidPresetError: If value is not a supported preset.
        """
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(c.value for c in cls)
            msg = f"Invalid preset '{value}' (expected one of: {choices})"
            raise InvalidPresetError(msg) from None


class BootstrapRequest(BaseModel):
    """Caller-supplied parameters of one bootstrap run.

    Attributes:
        repository: Repository identifier on the hosting service ("owner/name").
        destination: Clone destination, possibly relative.
        installer: Package manager backend.
        preset: Application preset to install.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    repository: Annotated[str, Field(min_length=1, description="owner/name")]
    destination: Annotated[str, Field(min_length=1)] = DEFAULT_DESTINATION
    installer: InstallerChoice = InstallerChoice.SCOOP
    preset: PresetChoice = PresetChoice.MINIMAL

    @field_validator("repository", "destination")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return v.strip()

    @classmethod
    def create(
        cls,
        repository: str,
        destination: str = DEFAULT_DESTINATION,
        installer: str | InstallerChoice = InstallerChoice.SCOOP,
        preset: str | PresetChoice = PresetChoice.MINIMAL,
    ) -> "BootstrapRequest":
        """Build a request, parsing installer and preset names.

        Installer and preset are parsed before the model is validated so an
        unknown name surfaces as InvalidInstallerError / InvalidPresetError
        rather than a generic validation error.

        Raises:
            InvalidInstallerError: If installer is not a supported choice.
            InvalidPresetError: If preset is not a supported choice.
            pydantic.ValidationError: If repository or destination is empty.
        """
        return cls(
            repository=repository,
            destination=destination,
            installer=InstallerChoice.parse(installer),
            preset=PresetChoice.parse(preset),
        )
