"""
tilesmith: content data layer for a tile-based world editor

Typed content model, schema validation of content JSON, entity registries
and sparse chunked world storage with tile palette compaction.
"""

__version__ = "0.1.0"
__author__ = "tilesmith Contributors"

# Content must be imported before world (content I/O compacts worlds)
from .content import (
    Chunk,
    Content,
    ContentFolder,
    Creature,
    Image,
    Sprite,
    StructuralError,
    Tile,
    World,
    parse_content,
    read_content,
    write_content,
)
from .world import compact_world
from .utils.logging_config import setup_logging

__all__ = [
    # Models
    "Chunk",
    "Content",
    "Creature",
    "Image",
    "Sprite",
    "Tile",
    "World",
    # Validation and I/O
    "StructuralError",
    "parse_content",
    "read_content",
    "write_content",
    "ContentFolder",
    # Worlds
    "compact_world",
    # Logging
    "setup_logging",
]
