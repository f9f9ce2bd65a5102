"""
Logging-related settings for tilesmith.
"""

import logging
from pathlib import Path

from .base import SettingsSection

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/tilesmith.csv"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(SettingsSection):
    """Console and file logging switches.

    The log file location is fixed; only whether it is written can change.
    """

    section = "logging"

    @property
    def console_logging(self) -> bool:
        return self._get_bool("console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("console_enabled", bool(value))

    @property
    def console_log_level(self) -> str:
        """Minimum level name shown on the console."""
        return self._get_str("console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Ignoring unknown console log level {value!r}, "
                f"keeping {self.console_log_level}"
            )
            return
        self._set("console_level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("console_use_colors", bool(value))

    @property
    def file_logging(self) -> bool:
        return self._get_bool("file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("file_enabled", bool(value))

    @property
    def log_file_path(self) -> str:
        return LOG_FILE_PATH

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(LOG_FILE_PATH).resolve()
