"""
Tile palette maintenance and empty-chunk collection.

A world's chunks store palette indices instead of tile ids. Editing can
leave the palette with entries nobody references or with the same tile id
at several indices; the functions here compact it again and drop chunks
that contain nothing but air. None of them run automatically.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Set

from ..content.models import AIR_TILE_ID, World

logger = logging.getLogger(__name__)


@dataclass
class CompactionReport:
    """What `compact_world` removed from a world."""

    duplicate_entries: int = 0
    unused_entries: int = 0
    empty_chunks: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.duplicate_entries or self.unused_entries or self.empty_chunks)


def index_of_tile_palette_entry(world: World, tile_id: str) -> Optional[int]:
    """Return the first palette index holding `tile_id`, or None."""
    try:
        return world.tile_palette.index(tile_id)
    except ValueError:
        return None


def insert_tile_palette_entry(world: World, tile_id: str) -> int:
    """Return the palette index of `tile_id`, appending it if missing."""
    index = index_of_tile_palette_entry(world, tile_id)
    if index is None:
        world.tile_palette.append(tile_id)
        index = len(world.tile_palette) - 1
        logger.debug(f"World '{world.id}': added palette entry {tile_id!r} at {index}")
    return index


def _remap_cells(world: World, mapping: Dict[int, int]) -> None:
    """Rewrite every cell of every chunk through `mapping`.

    Values missing from the mapping are kept as they are.
    """
    for chunk in world.chunks:
        chunk.data[:] = [mapping.get(value, value) for value in chunk.data]


def _drop_palette_entries(world: World, dropped: Set[int]) -> int:
    """Remove palette slots and renumber all cells that point past them.

    Every slot in `dropped` must be unreferenced by the time this runs.
    Returns the number of removed slots.
    """
    if not dropped:
        return 0

    old_palette = world.tile_palette
    new_palette: list[str] = []
    mapping: Dict[int, int] = {}
    for old_index, tile_id in enumerate(old_palette):
        if old_index in dropped:
            continue
        mapping[old_index] = len(new_palette)
        new_palette.append(tile_id)

    # All chunks are remapped before the palette is swapped
    _remap_cells(world, mapping)
    world.tile_palette = new_palette
    return len(old_palette) - len(new_palette)


def referenced_palette_indices(world: World) -> Set[int]:
    """Return every palette index used by at least one cell of the world."""
    used: Set[int] = set()
    for chunk in world.chunks:
        used.update(chunk.data)
    return used


def remove_unused_tile_palette_entries(world: World) -> int:
    """Remove palette entries no chunk cell refers to.

    Referenced entries keep their relative order; cells are renumbered to
    match. Cells pointing outside the palette are left untouched.

    Returns:
        Number of removed entries
    """
    used = referenced_palette_indices(world)
    unused = {index for index in range(len(world.tile_palette)) if index not in used}
    removed = _drop_palette_entries(world, unused)
    if removed:
        logger.debug(f"World '{world.id}': removed {removed} unused palette entries")
        if world.tile_palette[:1] != [AIR_TILE_ID]:
            logger.warning(
                f"World '{world.id}': palette index 0 is no longer {AIR_TILE_ID!r}"
            )
    return removed


def remove_duplicate_tile_palette_entries(world: World) -> int:
    """Collapse repeated tile ids in the palette onto their first occurrence.

    Cells referencing a later occurrence are pointed at the first one, then
    the later slots are removed and the palette renumbered.

    Returns:
        Number of removed entries
    """
    first_index: Dict[str, int] = {}
    mapping: Dict[int, int] = {}
    for index, tile_id in enumerate(world.tile_palette):
        if tile_id in first_index:
            mapping[index] = first_index[tile_id]
        else:
            first_index[tile_id] = index

    if not mapping:
        return 0

    _remap_cells(world, mapping)
    removed = _drop_palette_entries(world, set(mapping))
    logger.debug(f"World '{world.id}': merged {removed} duplicate palette entries")
    return removed


def is_empty_chunk_data(data: list[int], tile_palette: list[str]) -> bool:
    """Check whether every cell resolves to the air tile id."""
    air = {index for index, tile_id in enumerate(tile_palette) if tile_id == AIR_TILE_ID}
    return all(value in air for value in data)


def remove_empty_chunks(world: World) -> int:
    """Remove chunks whose cells all resolve to "air".

    Returns:
        Number of removed chunks
    """
    removed = 0
    index = 0
    while index < len(world.chunks):
        chunk = world.chunks[index]
        if is_empty_chunk_data(chunk.data, world.tile_palette):
            # The next chunk shifts into this position, so test it again
            del world.chunks[index]
            removed += 1
            continue
        index += 1

    if removed:
        logger.debug(f"World '{world.id}': removed {removed} empty chunks")
    return removed


def compact_world(world: World) -> CompactionReport:
    """Merge duplicate palette entries, drop unused ones, then empty chunks."""
    report = CompactionReport(
        duplicate_entries=remove_duplicate_tile_palette_entries(world),
        unused_entries=remove_unused_tile_palette_entries(world),
        empty_chunks=remove_empty_chunks(world),
    )
    if report.changed:
        logger.info(
            f"Compacted world '{world.id}': {report.duplicate_entries} duplicate and "
            f"{report.unused_entries} unused palette entries, "
            f"{report.empty_chunks} empty chunks removed"
        )
    return report
