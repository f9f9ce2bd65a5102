"""
Content folder access.

A content folder holds `content.json` and an `images/` directory with the
PNG files the content refers to.
"""

import logging
from pathlib import Path
from typing import List, Tuple

import orjson

from .content_file import read_content, write_content
from .images_folder import ImagesFolder
from .models import Content
from .types import StructuralError
from ..world.palette import compact_world

CONTENT_FILE_NAME = "content.json"
IMAGES_FOLDER_NAME = "images"


class ContentFolderError(Exception):
    """Raised when a content folder cannot be read or written."""

    pass


class ContentFolder:
    """Reads and writes the content and images of one content folder."""

    def __init__(self, path: str | Path, images_prefix: str = IMAGES_FOLDER_NAME + "/"):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.path = Path(path)
        self.images_prefix = images_prefix
        self.images = ImagesFolder()

    @property
    def content_file(self) -> Path:
        return self.path / CONTENT_FILE_NAME

    @property
    def images_folder(self) -> Path:
        return self.path / IMAGES_FOLDER_NAME

    def read(self) -> Tuple[Content, ImagesFolder]:
        """Read the content file and (re)load the images.

        Returns:
            The validated content and the loaded images

        Raises:
            ContentFolderError: If any stage fails; the message says which
        """
        self.logger.info(f"Reading content folder: {self.path}")

        if not self.path.is_dir():
            raise ContentFolderError(f"Failed to access content folder:\n{self.path}")

        if not self.content_file.is_file():
            raise ContentFolderError(
                f"Failed to access content file:\n{self.content_file}"
            )

        errors: List[str] = []
        try:
            content = read_content(
                self.content_file, errors, f"\n  in {CONTENT_FILE_NAME}"
            )
        except StructuralError as e:
            raise ContentFolderError(
                "Failed to parse content file:\n" + "\n".join(errors)
            ) from e
        except OSError as e:
            raise ContentFolderError(f"Failed to access content file:\n{e}") from e

        if not self.images_folder.is_dir():
            raise ContentFolderError(
                f"Failed to access images folder:\n{self.images_folder}"
            )

        try:
            self.images.reload(self.images_folder, self.images_prefix)
        except OSError as e:
            raise ContentFolderError(f"Failed to load images:\n{e}") from e

        self.logger.info(
            f"Loaded {len(content.worlds)} worlds, {len(content.tiles)} tiles, "
            f"{len(content.creatures)} creatures and {len(self.images)} images"
        )
        return content, self.images

    def write(self, content: Content, compact: bool = False) -> None:
        """Write content back to the content file.

        Args:
            content: Content to write
            compact: Compact every world's palette and chunks first

        Raises:
            ContentFolderError: If the file cannot be written
        """
        if compact:
            for world in content.worlds:
                compact_world(world)

        try:
            write_content(self.content_file, content)
        except (OSError, orjson.JSONEncodeError) as e:
            raise ContentFolderError(f"Failed to write content file:\n{e}") from e

        self.logger.info(f"Wrote content to {self.content_file}")
