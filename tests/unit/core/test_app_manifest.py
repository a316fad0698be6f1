"""Unit tests for application manifest loading and models."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from shellstrap.core.errors import PresetUnsupportedError
from shellstrap.core.manifest import (
    AppManifestNotFoundError,
    AppManifestParseError,
    AppManifestValidationError,
    get_app_manifest_path,
    load_app_manifest,
)
from shellstrap.models.manifest import AppManifest, InstallerEntry


class TestLoadAppManifest:
    """Tests for load_app_manifest."""

    def test_loads_valid_manifest(self, profile_repo: Path) -> None:
        """A valid shellstrap.toml is loaded."""
        manifest = load_app_manifest(profile_repo)

        assert manifest.meta.version == "1.0"
        assert manifest.installers["scoop"].command == "Install-ScoopApps"
        assert manifest.installers["scoop"].presets == ["minimal", "full"]

    def test_missing_manifest(self, tmp_path: Path) -> None:
        """A repository without a manifest is a reportable error."""
        with pytest.raises(AppManifestNotFoundError, match="shellstrap.toml"):
            load_app_manifest(tmp_path)

    def test_custom_filename(self, profile_repo: Path) -> None:
        """The manifest filename is configurable."""
        (profile_repo / "shellstrap.toml").rename(profile_repo / "apps.toml")

        assert get_app_manifest_path(profile_repo, "apps.toml") == profile_repo / "apps.toml"
        assert "scoop" in load_app_manifest(profile_repo, "apps.toml").installers

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises AppManifestParseError."""
        (tmp_path / "shellstrap.toml").write_text("[installers.scoop\n")

        with pytest.raises(AppManifestParseError):
            load_app_manifest(tmp_path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise AppManifestValidationError."""
        (tmp_path / "shellstrap.toml").write_text(
            '[installers.scoop]\ncommand = "Install-ScoopApps"\npresets = []\n'
        )

        with pytest.raises(AppManifestValidationError):
            load_app_manifest(tmp_path)


class TestAppManifestModel:
    """Tests for AppManifest and InstallerEntry."""

    @pytest.fixture
    def manifest(self) -> AppManifest:
        """Manifest with a scoop entry only."""
        return AppManifest(
            installers={
                "scoop": InstallerEntry(command="Install-ScoopApps", presets=["minimal"]),
            }
        )

    def test_entry_for(self, manifest: AppManifest) -> None:
        """entry_for returns the declared entry."""
        assert manifest.entry_for("scoop", "minimal").command == "Install-ScoopApps"

    def test_entry_for_unknown_installer(self, manifest: AppManifest) -> None:
        """An undeclared installer raises PresetUnsupportedError."""
        with pytest.raises(PresetUnsupportedError, match="declared: scoop"):
            manifest.entry_for("winget", "minimal")

    def test_entry_for_unknown_preset(self, manifest: AppManifest) -> None:
        """A preset the installer doesn't list raises PresetUnsupportedError."""
        with pytest.raises(PresetUnsupportedError, match="does not support preset 'full'"):
            manifest.entry_for("scoop", "full")

    def test_empty_manifest(self) -> None:
        """An empty manifest declares nothing."""
        with pytest.raises(PresetUnsupportedError, match="declared: none"):
            AppManifest().entry_for("scoop", "minimal")

    @pytest.mark.parametrize(
        "command",
        ["Install-Apps; Remove-Item C:\\", "Install Apps", "$(evil)", ""],
    )
    def test_command_must_be_single_name(self, command: str) -> None:
        """Commands can't smuggle in extra PowerShell."""
        with pytest.raises(ValidationError):
            InstallerEntry(command=command, presets=["minimal"])

    def test_rejects_unknown_keys(self) -> None:
        """Unknown manifest keys are rejected."""
        with pytest.raises(ValidationError):
            AppManifest.model_validate({"apps": ["git"]})
