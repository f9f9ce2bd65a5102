"""
Loading the PNG images referenced by content.

Images are kept in memory keyed by file name (optionally prefixed with the
folder name, e.g. "images/grass.png") so that `Image.path` values from the
content can be looked up directly.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, Optional

from PIL import Image

IMAGE_SUFFIX = ".png"


def iter_image_files(folder: Path) -> Iterator[Path]:
    """Yield the PNG files directly inside `folder`, sorted by name."""
    for entry in sorted(Path(folder).iterdir()):
        if not entry.is_file() or not entry.name.endswith(IMAGE_SUFFIX):
            continue
        yield entry


class ImagesFolder:
    """Holds the images loaded from an images folder.

    Reloading always releases the previously loaded images first.
    """

    def __init__(self, images: Optional[Dict[str, Image.Image]] = None):
        self.images: Dict[str, Image.Image] = images if images is not None else {}
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def __len__(self) -> int:
        return len(self.images)

    def __contains__(self, name: object) -> bool:
        return name in self.images

    def get(self, name: str) -> Optional[Image.Image]:
        """Return a loaded image by its (prefixed) file name."""
        return self.images.get(name)

    def unload(self) -> Dict[str, Image.Image]:
        """Close every loaded image and clear the mapping."""
        for image in self.images.values():
            image.close()
        count = len(self.images)
        self.images.clear()
        if count:
            self.logger.debug(f"Unloaded {count} images")
        return self.images

    def reload(self, folder: Path, prefix: str = "") -> Dict[str, Image.Image]:
        """Unload current images, then load every PNG in `folder`.

        Args:
            folder: Directory to scan (not recursive)
            prefix: String prepended to each file name to form its key

        Returns:
            Mapping of prefixed file names to loaded images

        Raises:
            OSError: If the folder cannot be listed or an image cannot be read
        """
        self.unload()

        for image_file in iter_image_files(folder):
            with Image.open(image_file) as opened:
                # Load pixel data now so the file handle can be closed
                opened.load()
                self.images[prefix + image_file.name] = opened.copy()

        self.logger.info(f"Loaded {len(self.images)} images from {folder}")
        return self.images
