"""
Chunked world storage.

Worlds store tiles in sparse 32x32 chunks whose cells index a world-local
tile palette. This package provides the chunk registry, the palette and
the compaction passes that keep both small.
"""

from .palette import (
    CompactionReport,
    compact_world,
    index_of_tile_palette_entry,
    insert_tile_palette_entry,
    remove_duplicate_tile_palette_entries,
    remove_empty_chunks,
    remove_unused_tile_palette_entries,
)
from .chunks import (
    CHUNKS,
    delete_chunk,
    get_chunk,
    get_tile_at,
    index_of_chunk,
    insert_chunk,
    set_tile_at,
    world_to_chunk,
)

__all__ = [
    "CHUNKS",
    "CompactionReport",
    "compact_world",
    "delete_chunk",
    "get_chunk",
    "get_tile_at",
    "index_of_chunk",
    "index_of_tile_palette_entry",
    "insert_chunk",
    "insert_tile_palette_entry",
    "remove_duplicate_tile_palette_entries",
    "remove_empty_chunks",
    "remove_unused_tile_palette_entries",
    "set_tile_at",
    "world_to_chunk",
]
