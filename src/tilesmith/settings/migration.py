"""
Settings migration system for tilesmith.

Each migration step upgrades one version to the next; older stores are
walked through every step in order.
"""

import logging
from typing import Callable, Dict, TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsMigrator:
    """Stamps new stores with the current version and upgrades old ones."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings
        self.steps: Dict[str, tuple[str, Callable[[], None]]] = {
            ConfigVersion.V1_0.value: (ConfigVersion.V1_1.value, self._rename_content_key),
        }

    def ensure_version(self) -> None:
        stored = str(self.settings.value("app/version", "") or "")
        current = ConfigVersion.CURRENT.value

        if not stored:
            self.settings.setValue("app/version", current)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
            return

        if stored != current:
            self.migrate(stored)

    def migrate(self, from_version: str) -> str:
        """Apply every step from `from_version` on; returns the reached version."""
        version = from_version
        while version in self.steps:
            next_version, step = self.steps[version]
            logger.info(f"Migrating configuration from {version} to {next_version}")
            step()
            version = next_version

        if version == from_version:
            logger.warning(f"No migration path from configuration version {from_version}")
            return version

        self.settings.setValue("app/version", version)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()
        return version

    def _rename_content_key(self) -> None:
        """1.0 stored the last folder as paths/content."""
        old_folder = str(self.settings.value("paths/content", "") or "")
        if old_folder:
            self.settings.setValue("paths/last_content_folder", old_folder)
            logger.debug(f"Moved last content folder setting: {old_folder}")
        self.settings.remove("paths/content")
