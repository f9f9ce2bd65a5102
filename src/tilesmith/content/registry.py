"""
Registries for content entities.

An `EntityRegistry` gives one collection of an owner object the same
locate/get/insert/delete contract: lookups are linear scans in insertion
order, inserts append an element built from the kind's defaults, and
duplicate or missing keys are reported through `RegistryResult` instead of
exceptions.
"""

import logging
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from .models import Content, Creature, Image, Sprite, Tile, World
from .types import RegistryError, RegistryResult

TOwner = TypeVar("TOwner")
TEntity = TypeVar("TEntity")
TKey = TypeVar("TKey", bound=Hashable)


class EntityRegistry(Generic[TOwner, TEntity, TKey]):
    """Uniform CRUD access to one collection of an owner object.

    Args:
        kind: Entity kind name used in messages ("creature", "chunk")
        collection: Returns the owner's list holding the entities
        key: Extracts the key of an entity
        factory: Builds a new entity with default values for a key
    """

    def __init__(
        self,
        kind: str,
        collection: Callable[[TOwner], List[TEntity]],
        key: Callable[[TEntity], TKey],
        factory: Callable[[TKey], TEntity],
    ):
        self.kind = kind
        self._collection = collection
        self._key = key
        self._factory = factory
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def __repr__(self) -> str:
        return f"EntityRegistry(kind={self.kind!r})"

    def locate(self, owner: TOwner, key: TKey) -> Optional[int]:
        """Return the index of the first entity with `key`, or None."""
        for index, entity in enumerate(self._collection(owner)):
            if self._key(entity) == key:
                return index
        return None

    def get(self, owner: TOwner, key: TKey) -> Optional[TEntity]:
        """Return the entity with `key`, or None if absent."""
        index = self.locate(owner, key)
        if index is None:
            return None
        return self._collection(owner)[index]

    def require(self, owner: TOwner, key: TKey) -> TEntity:
        """Return the entity with `key`.

        Raises:
            KeyError: If no entity has that key
        """
        entity = self.get(owner, key)
        if entity is None:
            raise KeyError(f"{self.kind} {key!r} does not exist")
        return entity

    def keys(self, owner: TOwner) -> List[TKey]:
        """Return all keys in insertion order."""
        return [self._key(entity) for entity in self._collection(owner)]

    def insert(self, owner: TOwner, key: TKey) -> RegistryResult:
        """Append a default entity for `key` unless the key is taken."""
        if self.locate(owner, key) is not None:
            self.logger.info(f"Refused to insert {self.kind} {key!r}: already exists")
            return RegistryResult.failure(self.kind, key, RegistryError.DUPLICATE_KEY)

        entities = self._collection(owner)
        entities.append(self._factory(key))
        self.logger.debug(f"Inserted {self.kind} {key!r}")
        return RegistryResult.success(self.kind, key, len(entities) - 1)

    def delete(self, owner: TOwner, key: TKey) -> RegistryResult:
        """Remove the entity with `key`, keeping the order of the rest."""
        index = self.locate(owner, key)
        if index is None:
            self.logger.info(f"Refused to delete {self.kind} {key!r}: does not exist")
            return RegistryResult.failure(self.kind, key, RegistryError.NOT_FOUND)

        del self._collection(owner)[index]
        self.logger.debug(f"Deleted {self.kind} {key!r}")
        return RegistryResult.success(self.kind, key, index)


class IdRegistry(EntityRegistry[Content, TEntity, str]):
    """Registry for a top-level content collection keyed by string id."""

    def insert(self, owner: Content, key: str) -> RegistryResult:
        if not isinstance(key, str) or not key:
            raise ValueError(f"Invalid {self.kind} id: {key!r}")
        return super().insert(owner, key)


CREATURES: IdRegistry[Creature] = IdRegistry(
    "creature", lambda content: content.creatures, lambda e: e.id, Creature.default
)
IMAGES: IdRegistry[Image] = IdRegistry(
    "image", lambda content: content.images, lambda e: e.id, Image.default
)
SPRITES: IdRegistry[Sprite] = IdRegistry(
    "sprite", lambda content: content.sprites, lambda e: e.id, Sprite.default
)
TILES: IdRegistry[Tile] = IdRegistry(
    "tile", lambda content: content.tiles, lambda e: e.id, Tile.default
)
WORLDS: IdRegistry[World] = IdRegistry(
    "world", lambda content: content.worlds, lambda e: e.id, World.default
)

REGISTRIES: Dict[str, IdRegistry] = {
    registry.kind: registry
    for registry in (CREATURES, IMAGES, SPRITES, TILES, WORLDS)
}
"""Top-level registries by kind name."""


# Creatures

def index_of_creature(content: Content, id: str) -> Optional[int]:
    return CREATURES.locate(content, id)


def get_creature(content: Content, id: str) -> Optional[Creature]:
    return CREATURES.get(content, id)


def insert_creature(content: Content, id: str) -> RegistryResult:
    return CREATURES.insert(content, id)


def delete_creature(content: Content, id: str) -> RegistryResult:
    return CREATURES.delete(content, id)


# Images

def index_of_image(content: Content, id: str) -> Optional[int]:
    return IMAGES.locate(content, id)


def get_image(content: Content, id: str) -> Optional[Image]:
    return IMAGES.get(content, id)


def insert_image(content: Content, id: str) -> RegistryResult:
    return IMAGES.insert(content, id)


def delete_image(content: Content, id: str) -> RegistryResult:
    return IMAGES.delete(content, id)


# Sprites

def index_of_sprite(content: Content, id: str) -> Optional[int]:
    return SPRITES.locate(content, id)


def get_sprite(content: Content, id: str) -> Optional[Sprite]:
    return SPRITES.get(content, id)


def insert_sprite(content: Content, id: str) -> RegistryResult:
    return SPRITES.insert(content, id)


def delete_sprite(content: Content, id: str) -> RegistryResult:
    return SPRITES.delete(content, id)


# Tiles

def index_of_tile(content: Content, id: str) -> Optional[int]:
    return TILES.locate(content, id)


def get_tile(content: Content, id: str) -> Optional[Tile]:
    return TILES.get(content, id)


def insert_tile(content: Content, id: str) -> RegistryResult:
    return TILES.insert(content, id)


def delete_tile(content: Content, id: str) -> RegistryResult:
    return TILES.delete(content, id)


# Worlds

def index_of_world(content: Content, id: str) -> Optional[int]:
    return WORLDS.locate(content, id)


def get_world(content: Content, id: str) -> Optional[World]:
    return WORLDS.get(content, id)


def insert_world(content: Content, id: str) -> RegistryResult:
    return WORLDS.insert(content, id)


def delete_world(content: Content, id: str) -> RegistryResult:
    return WORLDS.delete(content, id)
