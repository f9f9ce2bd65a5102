"""
Command line entry point for tilesmith.
Usage: python -m tilesmith {check,compact,format} [FOLDER]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .content import ContentFolder, ContentFolderError, check_references
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging
from .world import compact_world


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilesmith", description="Check and compact tilesmith content folders."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--profile", default="default", help="Settings profile to use (default: default)"
    )
    parser.add_argument(
        "--settings-file",
        type=Path,
        help="INI file to read settings from instead of the platform default",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("check", "validate content.json and report reference problems"),
        ("compact", "compact every world and write content.json back"),
        ("format", "rewrite content.json in canonical form"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "folder",
            nargs="?",
            type=Path,
            help="content folder (default: last opened folder)",
        )
    return parser


def resolve_folder(folder: Optional[Path], settings: AppSettings) -> Path:
    """Return the folder to work on, falling back to the last opened one."""
    if folder is not None:
        return folder
    if settings.last_content_folder is None:
        raise ConfigError("No content folder given and none opened before")
    return settings.last_content_folder


def run_check(folder: ContentFolder) -> int:
    logger = logging.getLogger(f"{__name__}.check")
    content, _images = folder.read()

    result = check_references(content)
    for warning in result.warnings:
        logger.warning(warning)
    for error in result.errors:
        logger.error(error)

    if not result.is_valid:
        logger.error(f"{folder.path}: {len(result.errors)} error(s)")
        return 1
    logger.info(f"{folder.path}: OK ({len(result.warnings)} warning(s))")
    return 0


def run_compact(folder: ContentFolder) -> int:
    logger = logging.getLogger(f"{__name__}.compact")
    content, _images = folder.read()

    for world in content.worlds:
        report = compact_world(world)
        if not report.changed:
            logger.info(f"World '{world.id}' is already compact")

    folder.write(content)
    return 0


def run_format(folder: ContentFolder, compact: bool) -> int:
    content, _images = folder.read()
    folder.write(content, compact=compact)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    settings = AppSettings(profile=args.profile, storage_path=args.settings_file)
    setup_logging(settings)

    try:
        path = resolve_folder(args.folder, settings)
        folder = ContentFolder(path, images_prefix=settings.images_prefix)
        if args.command == "check":
            status = run_check(folder)
        elif args.command == "compact":
            status = run_compact(folder)
        else:
            status = run_format(folder, settings.compact_on_save)
    except (ConfigError, ContentFolderError) as e:
        logger.error(str(e))
        return 1

    settings.add_recent_folder(path)
    return status


if __name__ == "__main__":
    sys.exit(main())
