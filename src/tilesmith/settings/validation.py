"""
Settings validation system for tilesmith.
"""

import logging
from pathlib import Path
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)

CONTENT_FILE_NAME = "content.json"


class SettingsValidator:
    """Checks that remembered content folders still exist."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        last_folder = self.settings.last_content_folder
        if last_folder is None:
            warnings.append("No content folder opened yet")
        elif not last_folder.is_dir():
            errors.append(f"Content folder does not exist: {last_folder}")
        elif not (last_folder / CONTENT_FILE_NAME).is_file():
            warnings.append(f"Content folder has no {CONTENT_FILE_NAME}: {last_folder}")

        recent = self.settings.recent_folders
        existing = [folder for folder in recent if Path(folder).is_dir()]
        for folder in recent:
            if folder not in existing:
                warnings.append(f"Recent folder no longer exists: {folder}")

        if len(existing) != len(recent):
            logger.info(f"Dropping {len(recent) - len(existing)} missing recent folder(s)")
            self.settings.paths.recent_folders = existing

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
