"""Version string helpers shared by the platform modules."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import NamedTuple

from cap_sync_version.errors import InvalidVersionError, ManifestError

DEFAULT_PACKAGE_JSON = Path("package.json")

VERSION_RE = re.compile(
    r"^v?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?$"
)


class VersionParts(NamedTuple):
    major: int
    minor: int
    patch: int
    prerelease: str | None = None

    @property
    def version_without_prerelease(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def split_version_into_parts(version: str) -> VersionParts:
    """Split ``version`` into its numeric components and optional prerelease tag.

    A leading ``v`` and any ``+build`` metadata are accepted and dropped.
    """
    match = VERSION_RE.match(version.strip())
    if not match:
        raise InvalidVersionError(version)
    return VersionParts(
        int(match.group("major")),
        int(match.group("minor")),
        int(match.group("patch")),
        match.group("prerelease"),
    )


def read_package_version(package_json: Path = DEFAULT_PACKAGE_JSON) -> str:
    if not package_json.is_file():
        raise FileNotFoundError(f"package manifest not found at {package_json}")
    try:
        payload = json.loads(package_json.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(package_json, f"invalid JSON ({exc.msg})") from exc

    version = payload.get("version") if isinstance(payload, dict) else None
    if not isinstance(version, str) or not version.strip():
        raise ManifestError(package_json, "no \"version\" field")
    return version.strip()
