"""
Sparse chunk storage for worlds.

A world keeps its allocated chunks in a plain list, so memory grows with
the number of chunks rather than with the area they span. Chunks are found
by a linear scan over their (x, y) coordinates.
"""

import logging
from typing import Optional, Tuple

from ..content.models import AIR_TILE_ID, CHUNK_HEIGHT, CHUNK_WIDTH, Chunk, World
from ..content.registry import EntityRegistry
from ..content.schema import is_integer
from ..content.types import RegistryError, RegistryResult
from .palette import insert_tile_palette_entry

logger = logging.getLogger(__name__)

ChunkCoord = Tuple[int, int]

CHUNKS: EntityRegistry[World, Chunk, ChunkCoord] = EntityRegistry(
    "chunk",
    lambda world: world.chunks,
    lambda chunk: (chunk.x, chunk.y),
    lambda coord: Chunk.new(*coord),
)


def index_of_chunk(world: World, chunk_x: int, chunk_y: int) -> Optional[int]:
    """Return the index of the chunk at (chunk_x, chunk_y), or None."""
    return CHUNKS.locate(world, (chunk_x, chunk_y))


def get_chunk(world: World, chunk_x: int, chunk_y: int) -> Optional[Chunk]:
    """Return the chunk at (chunk_x, chunk_y), or None if not allocated."""
    return CHUNKS.get(world, (chunk_x, chunk_y))


def insert_chunk(world: World, chunk_x: int, chunk_y: int) -> RegistryResult:
    """Allocate a new chunk at (chunk_x, chunk_y).

    Every cell of the new chunk is palette index 0, which is "air" only as
    long as the world's palette still starts with it.
    """
    if not is_integer(chunk_x) or not is_integer(chunk_y):
        return RegistryResult.failure(
            CHUNKS.kind, (chunk_x, chunk_y), RegistryError.INVALID_COORDINATE
        )

    if world.tile_palette[:1] != [AIR_TILE_ID]:
        logger.warning(
            f"World '{world.id}': new chunk ({chunk_x}, {chunk_y}) starts with "
            f"palette index 0 which is not {AIR_TILE_ID!r}"
        )
    return CHUNKS.insert(world, (chunk_x, chunk_y))


def delete_chunk(world: World, chunk_x: int, chunk_y: int) -> RegistryResult:
    """Remove the chunk at (chunk_x, chunk_y)."""
    return CHUNKS.delete(world, (chunk_x, chunk_y))


# =============================================================================
# Tile coordinate helpers
# =============================================================================


def world_to_chunk(tile_x: int, tile_y: int) -> Tuple[ChunkCoord, ChunkCoord]:
    """Split a world tile coordinate into chunk and in-chunk coordinates.

    Uses floor division, so tile -1 lies in chunk -1 at local 31.

    Returns:
        ((chunk_x, chunk_y), (local_x, local_y))
    """
    chunk_x, local_x = divmod(tile_x, CHUNK_WIDTH)
    chunk_y, local_y = divmod(tile_y, CHUNK_HEIGHT)
    return (chunk_x, chunk_y), (local_x, local_y)


def get_tile_at(world: World, tile_x: int, tile_y: int) -> Optional[str]:
    """Return the tile id at a world tile coordinate.

    Returns None when no chunk is allocated there or the cell points
    outside the palette.
    """
    if not is_integer(tile_x) or not is_integer(tile_y):
        raise ValueError(f"Tile coordinates are not integers: ({tile_x!r}, {tile_y!r})")

    (chunk_x, chunk_y), (local_x, local_y) = world_to_chunk(tile_x, tile_y)
    chunk = get_chunk(world, chunk_x, chunk_y)
    if chunk is None:
        return None

    value = chunk.data[Chunk.cell_index(local_x, local_y)]
    if value >= len(world.tile_palette):
        return None
    return world.tile_palette[value]


def set_tile_at(world: World, tile_x: int, tile_y: int, tile_id: str) -> int:
    """Place `tile_id` at a world tile coordinate.

    Allocates the chunk if needed and registers the tile id in the palette.

    Returns:
        The palette index written to the cell

    Raises:
        ValueError: If the tile coordinates are not integers
    """
    if not is_integer(tile_x) or not is_integer(tile_y):
        raise ValueError(f"Tile coordinates are not integers: ({tile_x!r}, {tile_y!r})")

    (chunk_x, chunk_y), (local_x, local_y) = world_to_chunk(tile_x, tile_y)
    chunk = get_chunk(world, chunk_x, chunk_y)
    if chunk is None:
        insert_chunk(world, chunk_x, chunk_y)
        chunk = CHUNKS.require(world, (chunk_x, chunk_y))

    index = insert_tile_palette_entry(world, tile_id)
    chunk.data[Chunk.cell_index(local_x, local_y)] = index
    return index
