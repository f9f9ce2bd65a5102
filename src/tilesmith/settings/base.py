"""
Shared access helpers for settings sections.
"""

from typing import Any, List, Optional, TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class SettingsSection:
    """One group of keys (``<section>/<name>``) inside a QSettings store.

    INI storage hands every value back as a string, so readers convert
    explicitly instead of trusting the stored type.
    """

    section = ""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _key(self, name: str) -> str:
        return f"{self.section}/{name}"

    def _get_str(self, name: str, default: str = "") -> str:
        value = self.settings.value(self._key(name), default)
        return str(value) if value is not None else default

    def _get_bool(self, name: str, default: bool = False) -> bool:
        value = self.settings.value(self._key(name), default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_list(self, name: str, default: Optional[List[str]] = None) -> List[str]:
        value = self.settings.value(self._key(name), default or [])
        if isinstance(value, list):
            return [
                str(item) if item is not None else ""
                for item in cast(list[object], value)
            ]
        # A one-element list comes back from INI files as a bare string
        if isinstance(value, str) and value:
            return [value]
        return list(default or [])

    def _set(self, name: str, value: Any) -> None:
        self.settings.setValue(self._key(name), value)
        self.settings.sync()
