"""
Core settings management for tilesmith.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .paths import PathSettings
from .editor import EditorSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "tilesmith"
APPLICATION = "tilesmith"


class AppSettings:
    """
    Persistent configuration backed by QSettings.

    Values live under a per-profile group, so several profiles can share one
    store. Sections are reachable as `paths`, `editor` and `logging`; the
    values the command line needs most are also exposed directly.
    """

    def __init__(self, profile: str = "default", storage_path: Optional[Path] = None):
        """Open the settings store.

        Args:
            profile: Settings profile name
            storage_path: INI file to use instead of the platform default
                location (tests and portable installs)
        """
        if storage_path is None:
            self.settings = QSettings(ORGANIZATION, APPLICATION)
        else:
            self.settings = QSettings(str(storage_path), QSettings.Format.IniFormat)
        self.profile = profile
        self.settings.beginGroup(profile)

        self.paths = PathSettings(self.settings)
        self.editor = EditorSettings(self.settings)
        self.logging = LoggingSettings(self.settings)

        SettingsMigrator(self.settings).ensure_version()
        self._validator = SettingsValidator(self)

        logger.debug(f"Settings profile '{profile}' loaded from {self.settings.fileName()}")

    def __repr__(self) -> str:
        return f"AppSettings(profile={self.profile!r}, file={self.settings.fileName()!r})"

    @property
    def is_first_run(self) -> bool:
        value = self.settings.value("app/first_run", True)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    def set_first_run_complete(self) -> None:
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    @property
    def version(self) -> str:
        return str(self.settings.value("app/version", ConfigVersion.CURRENT.value))

    # Shortcuts into the sections

    @property
    def last_content_folder(self) -> Optional[Path]:
        return self.paths.last_content_folder

    @last_content_folder.setter
    def last_content_folder(self, value: Optional[Path]) -> None:
        self.paths.last_content_folder = value

    @property
    def recent_folders(self) -> List[str]:
        return self.paths.recent_folders

    def add_recent_folder(self, folder: Union[str, Path]) -> None:
        """Record `folder` as opened (recent list keeps at most 10)."""
        self.paths.add_recent_folder(folder)

    def clear_recent_folders(self) -> None:
        self.paths.clear_recent_folders()

    @property
    def compact_on_save(self) -> bool:
        return self.editor.compact_on_save

    @compact_on_save.setter
    def compact_on_save(self, value: bool) -> None:
        self.editor.compact_on_save = value

    @property
    def images_prefix(self) -> str:
        return self.editor.images_prefix

    @images_prefix.setter
    def images_prefix(self, value: str) -> None:
        self.editor.images_prefix = value

    def validate(self) -> ValidationResult:
        """Check stored paths and prune recent folders that are gone."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        return self.settings.fileName()

    def sync(self) -> None:
        self.settings.sync()
