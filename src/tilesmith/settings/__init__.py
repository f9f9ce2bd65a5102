"""
Persistent configuration for tilesmith.

Settings are stored with Qt's QSettings (platform default location or an
INI file) and grouped per profile.

Usage:
    from tilesmith.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .base import SettingsSection
from .paths import PathSettings
from .editor import EditorSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "SettingsSection",
    "PathSettings",
    "EditorSettings",
    "LoggingSettings",
]
