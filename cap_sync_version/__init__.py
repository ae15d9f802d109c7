"""Sync a package version into Android build metadata."""

from cap_sync_version.android import (
    build_android_version_code,
    encode_version_code,
    ensure_patched,
    sync_version,
    update_android_version,
)
from cap_sync_version.errors import (
    AnchorNotFoundError,
    InvalidVersionError,
    ManifestError,
    MissingCompanionFileError,
    RangeExceededError,
    UnsupportedPrereleaseError,
    VersionSyncError,
)
from cap_sync_version.shared import VersionParts, read_package_version, split_version_into_parts

__version__ = "2.0.0"

__all__ = [
    "AnchorNotFoundError",
    "InvalidVersionError",
    "ManifestError",
    "MissingCompanionFileError",
    "RangeExceededError",
    "UnsupportedPrereleaseError",
    "VersionParts",
    "VersionSyncError",
    "build_android_version_code",
    "encode_version_code",
    "ensure_patched",
    "read_package_version",
    "split_version_into_parts",
    "sync_version",
    "update_android_version",
]
