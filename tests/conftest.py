"""Shared fixtures for tilesmith tests."""

from pathlib import Path

import pytest
from PIL import Image as PILImage

from tilesmith.content import Content, ContentFolder, write_content
from tilesmith.content.registry import insert_image, insert_sprite, insert_tile, insert_world
from tilesmith.settings import AppSettings
from tilesmith.world import set_tile_at


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """INI file isolated from the user's real settings."""
    return tmp_path / "settings.ini"


@pytest.fixture
def app_settings(settings_file: Path) -> AppSettings:
    return AppSettings(storage_path=settings_file)


@pytest.fixture
def content() -> Content:
    return Content()


@pytest.fixture
def sample_content() -> Content:
    """Small but complete content: one image, sprite, tile and world."""
    content = Content()
    insert_image(content, "terrain")
    content.images[0].path = "images/terrain.png"
    insert_sprite(content, "grass")
    content.sprites[0].image = "terrain"
    content.sprites[0].width = 10
    content.sprites[0].height = 10
    insert_tile(content, "grass")
    content.tiles[0].sprites = ["grass"]
    insert_world(content, "overworld")
    set_tile_at(content.worlds[0], 3, 4, "grass")
    return content


@pytest.fixture
def content_folder(tmp_path: Path, sample_content: Content) -> ContentFolder:
    """A content folder on disk with two PNGs and one unrelated file."""
    root = tmp_path / "content"
    images = root / "images"
    images.mkdir(parents=True)

    write_content(root / "content.json", sample_content)
    PILImage.new("RGBA", (20, 10), (0, 128, 0, 255)).save(images / "terrain.png")
    PILImage.new("RGBA", (10, 10), (255, 0, 0, 255)).save(images / "creatures.png")
    (images / "notes.txt").write_text("not an image", encoding="utf-8")

    return ContentFolder(root)
