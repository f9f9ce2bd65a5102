"""
Cross-entity checks for validated content.

The schema validator looks at one object at a time. These checks look at
how entities refer to each other: duplicate keys, chunk cells outside their
world's palette, and ids that name nothing.
"""

import logging
from collections import Counter
from typing import Iterable, List

from .models import AIR_TILE_ID, CHUNK_SIZE, Content
from .types import ValidationResult

logger = logging.getLogger(__name__)


def _duplicates(keys: Iterable[object]) -> List[object]:
    return [key for key, count in Counter(keys).items() if count > 1]


def check_references(content: Content) -> ValidationResult:
    """Check cross-entity consistency of validated content.

    Errors describe data the editor cannot use safely; warnings describe
    dangling references that are allowed but probably unintended.
    """
    errors: List[str] = []
    warnings: List[str] = []

    # Unique ids per collection
    for kind, entities in (
        ("creature", content.creatures),
        ("image", content.images),
        ("sprite", content.sprites),
        ("tile", content.tiles),
        ("world", content.worlds),
    ):
        for duplicate in _duplicates(entity.id for entity in entities):
            errors.append(f"Duplicate {kind} id: {duplicate!r}")

    image_ids = {image.id for image in content.images}
    sprite_ids = {sprite.id for sprite in content.sprites}
    tile_ids = {tile.id for tile in content.tiles}

    for creature in content.creatures:
        for sprite_id in creature.sprites:
            if sprite_id not in sprite_ids:
                warnings.append(f"Creature {creature.id!r} uses unknown sprite {sprite_id!r}")

    for tile in content.tiles:
        for sprite_id in tile.sprites:
            if sprite_id not in sprite_ids:
                warnings.append(f"Tile {tile.id!r} uses unknown sprite {sprite_id!r}")

    for sprite in content.sprites:
        if sprite.image not in image_ids:
            warnings.append(f"Sprite {sprite.id!r} uses unknown image {sprite.image!r}")

    for world in content.worlds:
        palette_size = len(world.tile_palette)

        for duplicate in _duplicates((chunk.x, chunk.y) for chunk in world.chunks):
            errors.append(f"World {world.id!r} has duplicate chunk at {duplicate}")

        for chunk in world.chunks:
            if len(chunk.data) != CHUNK_SIZE:
                errors.append(
                    f"World {world.id!r} chunk ({chunk.x}, {chunk.y}) has "
                    f"{len(chunk.data)} cells, expected {CHUNK_SIZE}"
                )
            out_of_range = sum(1 for value in chunk.data if value >= palette_size)
            if out_of_range:
                errors.append(
                    f"World {world.id!r} chunk ({chunk.x}, {chunk.y}) has "
                    f"{out_of_range} cell(s) outside the tile palette"
                )

        if world.tile_palette[:1] != [AIR_TILE_ID]:
            warnings.append(f"World {world.id!r} palette does not start with {AIR_TILE_ID!r}")

        for tile_id in world.tile_palette:
            if tile_id != AIR_TILE_ID and tile_id not in tile_ids:
                warnings.append(f"World {world.id!r} palette uses unknown tile {tile_id!r}")

    logger.debug(
        f"Reference check finished: {len(errors)} error(s), {len(warnings)} warning(s)"
    )
    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
