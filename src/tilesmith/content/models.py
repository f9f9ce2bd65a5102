"""
Data models for editor content.

Contains the dataclasses for every entity stored in a content file:
creatures, images, sprites, tiles and worlds (with their chunks). Models are
plain mutable containers; the editor changes their attributes in place and
the registries take care of creation and removal.

Field names follow Python conventions; `to_dict()`/`from_dict()` translate
to and from the camelCase JSON names used on disk.
"""

from dataclasses import dataclass, field
from typing import Any

CHUNK_WIDTH = 32
"""Width of a chunk in tiles."""

CHUNK_HEIGHT = 32
"""Height of a chunk in tiles."""

CHUNK_SIZE = CHUNK_WIDTH * CHUNK_HEIGHT
"""Number of cells in a chunk's flat data array."""

TILE_WIDTH = 10
"""Width of a tile in pixels."""

TILE_HEIGHT = 10
"""Height of a tile in pixels."""

AIR_TILE_ID = "air"
"""Tile id treated as empty space."""


# =============================================================================
# Entity Models
# =============================================================================


@dataclass
class Creature:
    """A creature definition.

    Sprite ids are free references and are not checked against the sprite
    collection.
    """

    id: str
    name: str
    description: str = ""
    sprites: list[str] = field(default_factory=lambda: [])
    width: int = 1
    height: int = 1
    can_fly: bool = False
    health_min: int = 0
    health_max: int = 0
    damage_min: int = 0
    damage_max: int = 0

    @classmethod
    def default(cls, id: str) -> "Creature":
        """Create a creature as it looks right after being inserted."""
        return cls(id=id, name=id)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Creature":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            sprites=list(data["sprites"]),
            width=data["width"],
            height=data["height"],
            can_fly=data["canFly"],
            health_min=data["healthMin"],
            health_max=data["healthMax"],
            damage_min=data["damageMin"],
            damage_max=data["damageMax"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "sprites": list(self.sprites),
            "width": self.width,
            "height": self.height,
            "canFly": self.can_fly,
            "healthMin": self.health_min,
            "healthMax": self.health_max,
            "damageMin": self.damage_min,
            "damageMax": self.damage_max,
        }


@dataclass
class Image:
    """An image file reference.

    `path` is opaque to the content layer; the images folder resolves it.
    """

    id: str
    path: str = ""

    @classmethod
    def default(cls, id: str) -> "Image":
        return cls(id=id)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Image":
        return cls(id=data["id"], path=data["path"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "path": self.path}


@dataclass
class Sprite:
    """A rectangular region of an image, in pixels."""

    id: str
    image: str = ""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def default(cls, id: str) -> "Sprite":
        return cls(id=id)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Sprite":
        return cls(
            id=data["id"],
            image=data["image"],
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "image": self.image,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class Tile:
    """A tile definition placed into world chunks through the tile palette."""

    id: str
    name: str
    description: str = ""
    sprites: list[str] = field(default_factory=lambda: [])
    is_opaque: bool = False
    is_solid: bool = False

    @classmethod
    def default(cls, id: str) -> "Tile":
        return cls(id=id, name=id)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Tile":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            sprites=list(data["sprites"]),
            is_opaque=data["isOpaque"],
            is_solid=data["isSolid"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "sprites": list(self.sprites),
            "isOpaque": self.is_opaque,
            "isSolid": self.is_solid,
        }


# =============================================================================
# World Models
# =============================================================================


@dataclass
class Chunk:
    """A CHUNK_WIDTH x CHUNK_HEIGHT block of tile cells.

    `data` is stored row by row; every cell is an index into the owning
    world's tile palette. `x` and `y` are chunk coordinates and may be
    negative.
    """

    data: list[int]
    x: int
    y: int

    @classmethod
    def new(cls, x: int, y: int) -> "Chunk":
        """Allocate a chunk with every cell set to palette index 0."""
        return cls(data=[0] * CHUNK_SIZE, x=x, y=y)

    @staticmethod
    def cell_index(local_x: int, local_y: int) -> int:
        """Return the flat data index of a cell inside a chunk.

        Raises:
            IndexError: If the local coordinates fall outside the chunk
        """
        if not (0 <= local_x < CHUNK_WIDTH and 0 <= local_y < CHUNK_HEIGHT):
            raise IndexError(f"Chunk cell out of bounds: ({local_x}, {local_y})")
        return local_y * CHUNK_WIDTH + local_x

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Chunk":
        return cls(data=list(data["data"]), x=data["x"], y=data["y"])

    def to_dict(self) -> dict[str, Any]:
        return {"data": list(self.data), "x": self.x, "y": self.y}


@dataclass
class World:
    """A sparse world made of chunks and a world-local tile palette.

    Palette index 0 is "air" by convention, set only when the world is
    created through the registry.
    """

    id: str
    name: str
    chunks: list[Chunk] = field(default_factory=lambda: [])
    tile_palette: list[str] = field(default_factory=lambda: [AIR_TILE_ID])

    @classmethod
    def default(cls, id: str) -> "World":
        return cls(id=id, name=id, chunks=[], tile_palette=[AIR_TILE_ID])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "World":
        return cls(
            id=data["id"],
            name=data["name"],
            chunks=[Chunk.from_dict(chunk) for chunk in data["chunks"]],
            tile_palette=list(data["tilePalette"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "chunks": [chunk.to_dict() for chunk in self.chunks],
            "tilePalette": list(self.tile_palette),
        }


# =============================================================================
# Content Aggregate
# =============================================================================


@dataclass
class Content:
    """Everything stored in a content file, as five ordered collections."""

    creatures: list[Creature] = field(default_factory=lambda: [])
    images: list[Image] = field(default_factory=lambda: [])
    sprites: list[Sprite] = field(default_factory=lambda: [])
    tiles: list[Tile] = field(default_factory=lambda: [])
    worlds: list[World] = field(default_factory=lambda: [])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Content":
        """Build content from a JSON object that already passed validation."""
        return cls(
            creatures=[Creature.from_dict(item) for item in data["creatures"]],
            images=[Image.from_dict(item) for item in data["images"]],
            sprites=[Sprite.from_dict(item) for item in data["sprites"]],
            tiles=[Tile.from_dict(item) for item in data["tiles"]],
            worlds=[World.from_dict(item) for item in data["worlds"]],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "creatures": [item.to_dict() for item in self.creatures],
            "images": [item.to_dict() for item in self.images],
            "sprites": [item.to_dict() for item in self.sprites],
            "tiles": [item.to_dict() for item in self.tiles],
            "worlds": [item.to_dict() for item in self.worlds],
        }
