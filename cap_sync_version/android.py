"""Synchronize the package version into the Android build.

``build.gradle`` is patched once so it loads ``versionCode`` and ``versionName``
from ``app.properties``; every sync afterwards only rewrites ``app.properties``.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from pathlib import Path

from cap_sync_version.errors import (
    AnchorNotFoundError,
    MissingCompanionFileError,
    RangeExceededError,
    UnsupportedPrereleaseError,
)
from cap_sync_version.properties import read_properties, write_properties
from cap_sync_version.shared import split_version_into_parts

log = logging.getLogger(__name__)

ANDROID_APP_PROPERTIES_PATH = Path("android/app/app.properties")
ANDROID_GRADLE_FILE_PATH = Path("android/app/build.gradle")

PLUGIN_ANCHOR = "apply plugin: 'com.android.application'"
PATCHED_MARKER = "appProperties.getProperty('versionCode').toInteger()"
VERSION_CODE_LINE = f"versionCode {PATCHED_MARKER}"
VERSION_NAME_LINE = "versionName appProperties.getProperty('versionName')"

INITIAL_APP_PROPERTIES = {"versionCode": "1000", "versionName": "v1.0.0"}

MAX_MAJOR = 2147
MAX_MINOR = 1000
MAX_PATCH = 1000
INT32_MAX = 2_147_483_647

_ANCHOR_RE = re.compile(rf"^([ \t]*{re.escape(PLUGIN_ANCHOR)}[ \t]*)(\r?)$", re.MULTILINE)
_VERSION_CODE_RE = re.compile(r"versionCode [^\r\n]*")
_VERSION_NAME_RE = re.compile(r"versionName [^\r\n]*")


def encode_version_code(major: int, minor: int, patch: int, prerelease: str | None = None) -> int:
    """Encode ``major.minor.patch`` as ``major * 1_000_000 + minor * 1_000 + patch``.

    The Android versionCode is a signed 32 bit int (max 2.147.483.647), so the
    scheme leaves room for 2147 major versions, 1000 minor versions per major
    and 1000 patch levels per minor. Version 2.4.1 becomes 2004001.

    Prerelease versions are rejected: their identifiers have no well defined
    integer ordering.
    """
    if prerelease:
        raise UnsupportedPrereleaseError(f"{major}.{minor}.{patch}-{prerelease}")
    if min(major, minor, patch) < 0:
        raise ValueError(f"version components must be non-negative, got {major}.{minor}.{patch}")

    if major > MAX_MAJOR:
        raise RangeExceededError(
            "major",
            major,
            MAX_MAJOR,
            f"You've reached the maximum major version number of {MAX_MAJOR}. "
            "A higher major version can't be added to the android versionCode field.",
        )
    if minor >= MAX_MINOR:
        raise RangeExceededError(
            "minor",
            minor,
            MAX_MINOR,
            f"You've reached the maximum of {MAX_MINOR} minor versions inside major version "
            f"{major}. Please increase version to the next major version.",
        )
    if patch >= MAX_PATCH:
        raise RangeExceededError(
            "patch",
            patch,
            MAX_PATCH,
            f"You've reached the maximum of {MAX_PATCH} patch versions inside major & minor "
            f"version {major}.{minor}. Please increase version to the next minor or major "
            "version instead.",
        )

    version_code = major * 1_000_000 + minor * 1_000 + patch
    if version_code > INT32_MAX:
        log.warning(
            "versionCode %s for %s.%s.%s is above %s and will be rejected by the Play Store",
            version_code,
            major,
            minor,
            patch,
            INT32_MAX,
        )
    return version_code


def build_android_version_code(new_version: str) -> int:
    parts = split_version_into_parts(new_version)
    return encode_version_code(parts.major, parts.minor, parts.patch, parts.prerelease)


def _shim_lines(build_gradle_path: Path, app_properties_path: Path) -> list[str]:
    relative = os.path.relpath(app_properties_path, build_gradle_path.parent)
    relative = Path(relative).as_posix()
    return [
        "def appProperties = new Properties();",
        f'file("{relative}").withInputStream {{ appProperties.load(it) }}',
    ]


def _insert_shim(match: re.Match[str], shim: list[str]) -> str:
    line, carriage_return = match.groups()
    eol = f"{carriage_return}\n"
    return eol.join([line, *shim]) + carriage_return


def _replace_first(
    pattern: re.Pattern[str],
    content: str,
    repl: Callable[[re.Match[str]], str],
    path: Path,
    anchor: str,
) -> str:
    new_content, count = pattern.subn(repl, content, count=1)
    if count != 1:
        raise AnchorNotFoundError(path, anchor)
    return new_content


def ensure_patched(
    build_gradle_path: Path = ANDROID_GRADLE_FILE_PATH,
    app_properties_path: Path = ANDROID_APP_PROPERTIES_PATH,
    logger: logging.Logger | None = None,
) -> bool:
    """Wire ``build.gradle`` to ``app.properties`` unless that was done already.

    Returns ``True`` when the build script was patched and ``app.properties``
    seeded, ``False`` when the build script already loads ``app.properties``.
    """
    logger = logger or log
    # newline="" keeps CRLF line endings intact.
    with build_gradle_path.open("r", encoding="utf-8", newline="") as fp:
        content = fp.read()

    if PATCHED_MARKER in content:
        logger.debug("%s already reads app.properties", build_gradle_path)
        return False

    shim = _shim_lines(build_gradle_path, app_properties_path)
    content = _replace_first(
        _ANCHOR_RE, content, lambda match: _insert_shim(match, shim), build_gradle_path, PLUGIN_ANCHOR
    )
    content = _replace_first(
        _VERSION_CODE_RE, content, lambda _match: VERSION_CODE_LINE, build_gradle_path, "versionCode"
    )
    content = _replace_first(
        _VERSION_NAME_RE, content, lambda _match: VERSION_NAME_LINE, build_gradle_path, "versionName"
    )

    # app.properties must exist before build.gradle carries the marker.
    write_properties(app_properties_path, INITIAL_APP_PROPERTIES)
    with build_gradle_path.open("w", encoding="utf-8", newline="") as fp:
        fp.write(content)
    logger.info("Patched %s to read versionCode and versionName from %s", build_gradle_path, app_properties_path)
    return True


def sync_version(
    app_properties_path: Path,
    version_code: int | str,
    version_name: str,
    logger: logging.Logger | None = None,
) -> dict[str, str]:
    """Store ``version_code`` and ``version_name`` in ``app.properties``.

    Other keys in the file are left as they are.
    """
    logger = logger or log
    if not app_properties_path.is_file():
        raise MissingCompanionFileError(app_properties_path)

    properties = read_properties(app_properties_path)
    properties["versionCode"] = str(version_code)
    properties["versionName"] = version_name
    write_properties(app_properties_path, properties)

    content = dict(properties)
    logger.info("New app.properties content: %s", content)
    return content


def update_android_version(
    new_version: str,
    build_gradle_path: Path = ANDROID_GRADLE_FILE_PATH,
    app_properties_path: Path = ANDROID_APP_PROPERTIES_PATH,
    logger: logging.Logger | None = None,
) -> None:
    logger = logger or log
    logger.info("Updating Android App Version...")

    # Validate before touching any file.
    version_code = build_android_version_code(new_version)
    version_name = split_version_into_parts(new_version).version_without_prerelease

    ensure_patched(build_gradle_path, app_properties_path, logger=logger)

    # app.properties may have been removed after build.gradle was patched.
    if not app_properties_path.is_file():
        raise MissingCompanionFileError(app_properties_path)

    sync_version(app_properties_path, version_code, version_name, logger=logger)
    logger.info("Updating Android App Version successful. Please commit all pending changes now.")
