"""
Path-related settings for tilesmith.
"""

from pathlib import Path
from typing import List, Optional, Union

from .base import SettingsSection

MAX_RECENT_FOLDERS = 10


class PathSettings(SettingsSection):
    """Remembers which content folders were opened."""

    section = "paths"

    @property
    def last_content_folder(self) -> Optional[Path]:
        """The most recently opened content folder, if any."""
        folder = self._get_str("last_content_folder")
        return Path(folder) if folder else None

    @last_content_folder.setter
    def last_content_folder(self, value: Optional[Path]) -> None:
        self._set("last_content_folder", str(value) if value else "")

    @property
    def recent_folders(self) -> List[str]:
        """Recently opened content folders, most recent first."""
        return self._get_list("recent_folders")

    @recent_folders.setter
    def recent_folders(self, value: List[str]) -> None:
        self._set("recent_folders", list(value))

    def add_recent_folder(self, folder: Union[str, Path]) -> None:
        """Move `folder` to the front of the recent list and remember it as last."""
        folder_str = str(folder)
        recent = [item for item in self.recent_folders if item != folder_str]
        recent.insert(0, folder_str)

        self.recent_folders = recent[:MAX_RECENT_FOLDERS]
        self.last_content_folder = Path(folder_str)

    def clear_recent_folders(self) -> None:
        self.recent_folders = []
