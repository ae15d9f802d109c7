"""Command line entry point: ``cap-sync-version``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cap_sync_version.android import (
    ANDROID_APP_PROPERTIES_PATH,
    ANDROID_GRADLE_FILE_PATH,
    build_android_version_code,
    update_android_version,
)
from cap_sync_version.errors import VersionSyncError
from cap_sync_version.shared import DEFAULT_PACKAGE_JSON, read_package_version

log = logging.getLogger("cap_sync_version")


def _add_verbosity(parser: argparse.ArgumentParser, default: bool | str) -> None:
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", default=default, help="show debug output"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", default=default, help="only show warnings and errors"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cap-sync-version",
        description="Sync the package.json version into the Android build files.",
    )
    _add_verbosity(parser, False)
    sub = parser.add_subparsers(dest="cmd", required=True)

    sync = sub.add_parser("sync", help="write the version into build.gradle / app.properties")
    _add_verbosity(sync, argparse.SUPPRESS)
    sync.add_argument("--package-json", type=Path, default=DEFAULT_PACKAGE_JSON)
    sync.add_argument("--version", dest="new_version", help="use this version instead of package.json")
    sync.add_argument("--build-gradle", type=Path, default=ANDROID_GRADLE_FILE_PATH)
    sync.add_argument("--app-properties", type=Path, default=ANDROID_APP_PROPERTIES_PATH)

    code = sub.add_parser("code", help="print the android versionCode for a version")
    _add_verbosity(code, argparse.SUPPRESS)
    code.add_argument("version")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    try:
        if args.cmd == "code":
            print(build_android_version_code(args.version))
            return 0

        new_version = args.new_version or read_package_version(args.package_json)
        update_android_version(
            new_version,
            build_gradle_path=args.build_gradle,
            app_properties_path=args.app_properties,
            logger=log,
        )
    except (VersionSyncError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
