"""
Content model for tile-based worlds.

Provides the typed content model, the schema validator that turns untrusted
JSON into it, the per-kind entity registries, cross-entity reference checks,
and content folder I/O.
"""

from .models import (
    AIR_TILE_ID,
    CHUNK_HEIGHT,
    CHUNK_SIZE,
    CHUNK_WIDTH,
    TILE_HEIGHT,
    TILE_WIDTH,
    Chunk,
    Content,
    Creature,
    Image,
    Sprite,
    Tile,
    World,
)
from .types import RegistryError, RegistryResult, StructuralError, ValidationResult
from .schema import (
    parse_content,
    validate_chunk,
    validate_content,
    validate_creature,
    validate_image,
    validate_sprite,
    validate_tile,
    validate_world,
)
from .registry import (
    CREATURES,
    IMAGES,
    REGISTRIES,
    SPRITES,
    TILES,
    WORLDS,
    EntityRegistry,
)
from .references import check_references
from .content_file import read_content, stringify_content, write_content
from .images_folder import ImagesFolder
from .content_folder import ContentFolder, ContentFolderError

__all__ = [
    # Constants
    "AIR_TILE_ID",
    "CHUNK_HEIGHT",
    "CHUNK_SIZE",
    "CHUNK_WIDTH",
    "TILE_HEIGHT",
    "TILE_WIDTH",
    # Models
    "Chunk",
    "Content",
    "Creature",
    "Image",
    "Sprite",
    "Tile",
    "World",
    # Results and errors
    "RegistryError",
    "RegistryResult",
    "StructuralError",
    "ValidationResult",
    # Validation
    "parse_content",
    "validate_chunk",
    "validate_content",
    "validate_creature",
    "validate_image",
    "validate_sprite",
    "validate_tile",
    "validate_world",
    "check_references",
    # Registries
    "EntityRegistry",
    "CREATURES",
    "IMAGES",
    "SPRITES",
    "TILES",
    "WORLDS",
    "REGISTRIES",
    # I/O
    "read_content",
    "stringify_content",
    "write_content",
    "ImagesFolder",
    "ContentFolder",
    "ContentFolderError",
]
