from pathlib import Path

from PIL import Image as PILImage

from tilesmith.content import ContentFolder, Content, check_references, write_content
from tilesmith.content.registry import insert_image, insert_sprite, insert_tile, insert_world
from tilesmith.world import delete_chunk, get_tile_at, insert_chunk, set_tile_at


def make_folder(root: Path) -> ContentFolder:
    (root / "images").mkdir(parents=True)
    PILImage.new("RGBA", (30, 10)).save(root / "images" / "terrain.png")
    write_content(root / "content.json", Content())
    return ContentFolder(root)


def test_edit_save_and_reload(tmp_path: Path):
    folder = make_folder(tmp_path / "game")
    content, images = folder.read()
    assert len(images) == 1

    insert_image(content, "terrain")
    content.images[0].path = "images/terrain.png"
    for index, tile_id in enumerate(["grass", "stone", "water"]):
        insert_sprite(content, tile_id)
        sprite = content.sprites[-1]
        sprite.image = "terrain"
        sprite.x = index * 10
        sprite.width = sprite.height = 10
        insert_tile(content, tile_id)
        content.tiles[-1].sprites = [tile_id]

    insert_world(content, "overworld")
    world = content.worlds[0]
    set_tile_at(world, 0, 0, "grass")
    set_tile_at(world, 1, 0, "stone")
    set_tile_at(world, 40, 40, "water")
    # Painting air over the only water tile leaves an empty chunk behind
    set_tile_at(world, 40, 40, "air")
    insert_chunk(world, -5, -5)

    assert check_references(content).is_valid
    folder.write(content, compact=True)

    reloaded, images = folder.read()
    world = reloaded.worlds[0]
    assert world.tile_palette == ["air", "grass", "stone"]
    assert [(chunk.x, chunk.y) for chunk in world.chunks] == [(0, 0)]
    assert get_tile_at(world, 0, 0) == "grass"
    assert get_tile_at(world, 1, 0) == "stone"
    assert get_tile_at(world, 2, 0) == "air"
    assert reloaded.images[0].path in images


def test_deleted_chunk_is_not_saved(tmp_path: Path):
    folder = make_folder(tmp_path / "game")
    content, _images = folder.read()
    insert_world(content, "caves")
    world = content.worlds[0]
    set_tile_at(world, 0, 0, "rock")
    set_tile_at(world, 100, 0, "rock")

    assert delete_chunk(world, 3, 0)
    folder.write(content)

    reloaded, _images = folder.read()
    assert len(reloaded.worlds[0].chunks) == 1
    assert get_tile_at(reloaded.worlds[0], 100, 0) is None
