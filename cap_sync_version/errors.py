"""Errors raised while syncing versions into platform build files."""

from __future__ import annotations

from pathlib import Path

README_URL = "https://github.com/bjesuiter/capacitor-sync-version-cli/blob/master/README.md"


class VersionSyncError(Exception):
    """Base class for every fatal sync failure."""


class InvalidVersionError(VersionSyncError, ValueError):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(
            f"'{version}' is not a semantic version. Expected MAJOR.MINOR.PATCH, "
            "optionally followed by -PRERELEASE and +BUILD."
        )


class ManifestError(VersionSyncError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to read a version from {path}: {reason}")


class UnsupportedPrereleaseError(VersionSyncError):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(
            f"This package has a prerelease version number ({version}), but prerelease "
            "versions are not allowed in the android versionCode "
            f"(see {README_URL}). Please change your package version to a version "
            "without prerelease part."
        )


class RangeExceededError(VersionSyncError):
    """A version component does not fit into its slot of the version code."""

    def __init__(self, component: str, value: int, limit: int, hint: str) -> None:
        self.component = component
        self.value = value
        self.limit = limit
        super().__init__(hint)


class MissingCompanionFileError(VersionSyncError, FileNotFoundError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"The file {path} does not exist. Please consult the readme of "
            f"cap-sync-version on how to setup android version sync ({README_URL})."
        )


class AnchorNotFoundError(VersionSyncError):
    def __init__(self, path: Path, anchor: str) -> None:
        self.path = path
        self.anchor = anchor
        super().__init__(
            f"Could not find `{anchor}` in {path}. The build script was left untouched; "
            "add the line or wire versionCode/versionName to app.properties by hand."
        )
