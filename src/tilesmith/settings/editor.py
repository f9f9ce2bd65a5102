"""
Editor behaviour settings for tilesmith.
"""

from .base import SettingsSection


class EditorSettings(SettingsSection):
    section = "editor"

    @property
    def compact_on_save(self) -> bool:
        """Whether worlds are compacted before the content file is written."""
        return self._get_bool("compact_on_save", False)

    @compact_on_save.setter
    def compact_on_save(self, value: bool) -> None:
        self._set("compact_on_save", bool(value))

    @property
    def images_prefix(self) -> str:
        """Prefix for image keys, matching how content refers to image paths."""
        return self._get_str("images_prefix", "images/")

    @images_prefix.setter
    def images_prefix(self, value: str) -> None:
        self._set("images_prefix", value)
