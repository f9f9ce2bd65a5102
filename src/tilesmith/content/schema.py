"""
Schema validation for content JSON.

Each schema type has an ordered table of field checks. Validation of an
object stops at the first failing field, but arrays of nested objects are
always validated element by element so that every broken element reports
its own errors before the array field itself is reported.

Errors are accumulated into a caller supplied list. Only `parse_content`
turns them into an exception.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from .models import Content
from .types import StructuralError

logger = logging.getLogger(__name__)

ElementValidator = Callable[[Any, List[str], str, str], List[str]]


@dataclass(frozen=True)
class FieldCheck:
    """A single field of a schema type.

    Attributes:
        name: JSON field name
        expected: Phrase describing the expected kind ("a string", ...)
        predicate: Check for scalar and scalar-array fields
        element: Validator for each element of an array of schema objects
    """

    name: str
    expected: str
    predicate: Optional[Callable[[Any], bool]] = None
    element: Optional[ElementValidator] = None


# =============================================================================
# Predicates
# =============================================================================


def is_integer(value: Any) -> bool:
    """Check for a JSON integer (booleans excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_unsigned_integer(value: Any) -> bool:
    return is_integer(value) and value >= 0


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_string_array(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def is_unsigned_integer_array(value: Any) -> bool:
    return isinstance(value, list) and all(is_unsigned_integer(item) for item in value)


# =============================================================================
# Generic object validation
# =============================================================================


def _suffix(location: str, source: str) -> str:
    where = f"\n  at {location}" if location else ""
    return where + source


def _validate_elements(
    kind: str,
    check: FieldCheck,
    value: Any,
    errors: List[str],
    source: str,
    location: str,
) -> bool:
    """Validate every element of an array field; True if all passed."""
    if not isinstance(value, list):
        return False

    assert check.element is not None
    prefix = location or kind
    passed = True
    for index, element in enumerate(value):
        before = len(errors)
        check.element(element, errors, source, f"{prefix}.{check.name}[{index}]")
        if len(errors) > before:
            passed = False
    return passed


def validate_object(
    kind: str,
    fields: Sequence[FieldCheck],
    value: Any,
    errors: Optional[List[str]] = None,
    source: str = "",
    location: str = "",
) -> List[str]:
    """Validate `value` against an ordered table of field checks.

    Args:
        kind: Schema type name used as the message prefix ("creature")
        fields: Field checks in declaration order
        value: Untrusted value to check
        errors: List to append errors to (a new list if None)
        source: Label appended to every error, e.g. the originating file
        location: Path of `value` inside its parent, e.g. "content.worlds[2]"

    Returns:
        The errors list
    """
    if errors is None:
        errors = []
    suffix = _suffix(location, source)

    if not isinstance(value, dict):
        errors.append(f"{kind} is not an object{suffix}")
        return errors

    # Only the key count is bounded; missing names fail their own check below
    if len(value) > len(fields):
        errors.append(f"{kind} has too many keys{suffix}")
        return errors

    for check in fields:
        field_value = value.get(check.name)
        if check.element is not None:
            passed = _validate_elements(
                kind, check, field_value, errors, source, location
            )
        else:
            assert check.predicate is not None
            passed = check.predicate(field_value)

        if not passed:
            errors.append(f"{kind}.{check.name} is not {check.expected}{suffix}")
            return errors

    return errors


# =============================================================================
# Schema types
# =============================================================================

CHUNK_FIELDS: tuple[FieldCheck, ...] = (
    FieldCheck("data", "an array of unsigned integers", is_unsigned_integer_array),
    FieldCheck("x", "an integer", is_integer),
    FieldCheck("y", "an integer", is_integer),
)


def validate_chunk(
    chunk: Any, errors: Optional[List[str]] = None, source: str = "", location: str = ""
) -> List[str]:
    """Append the errors of a chunk object to `errors`."""
    return validate_object("chunk", CHUNK_FIELDS, chunk, errors, source, location)


WORLD_FIELDS: tuple[FieldCheck, ...] = (
    FieldCheck("id", "a string", is_string),
    FieldCheck("name", "a string", is_string),
    FieldCheck("chunks", "an array of Chunks", element=validate_chunk),
    FieldCheck("tilePalette", "an array of strings", is_string_array),
)


def validate_world(
    world: Any, errors: Optional[List[str]] = None, source: str = "", location: str = ""
) -> List[str]:
    """Append the errors of a world object to `errors`."""
    return validate_object("world", WORLD_FIELDS, world, errors, source, location)


CREATURE_FIELDS: tuple[FieldCheck, ...] = (
    FieldCheck("id", "a string", is_string),
    FieldCheck("name", "a string", is_string),
    FieldCheck("description", "a string", is_string),
    FieldCheck("sprites", "an array of strings", is_string_array),
    FieldCheck("width", "an unsigned integer", is_unsigned_integer),
    FieldCheck("height", "an unsigned integer", is_unsigned_integer),
    FieldCheck("canFly", "a boolean", is_boolean),
    FieldCheck("healthMin", "an unsigned integer", is_unsigned_integer),
    FieldCheck("healthMax", "an unsigned integer", is_unsigned_integer),
    FieldCheck("damageMin", "an unsigned integer", is_unsigned_integer),
    FieldCheck("damageMax", "an unsigned integer", is_unsigned_integer),
)


def validate_creature(
    creature: Any, errors: Optional[List[str]] = None, source: str = "", location: str = ""
) -> List[str]:
    """Append the errors of a creature object to `errors`."""
    return validate_object("creature", CREATURE_FIELDS, creature, errors, source, location)


IMAGE_FIELDS: tuple[FieldCheck, ...] = (
    FieldCheck("id", "a string", is_string),
    FieldCheck("path", "a string", is_string),
)


def validate_image(
    image: Any, errors: Optional[List[str]] = None, source: str = "", location: str = ""
) -> List[str]:
    """Append the errors of an image object to `errors`."""
    return validate_object("image", IMAGE_FIELDS, image, errors, source, location)


SPRITE_FIELDS: tuple[FieldCheck, ...] = (
    FieldCheck("id", "a string", is_string),
    FieldCheck("image", "a string", is_string),
    FieldCheck("x", "an unsigned integer", is_unsigned_integer),
    FieldCheck("y", "an unsigned integer", is_unsigned_integer),
    FieldCheck("width", "an unsigned integer", is_unsigned_integer),
    FieldCheck("height", "an unsigned integer", is_unsigned_integer),
)


def validate_sprite(
    sprite: Any, errors: Optional[List[str]] = None, source: str = "", location: str = ""
) -> List[str]:
    """Append the errors of a sprite object to `errors`."""
    return validate_object("sprite", SPRITE_FIELDS, sprite, errors, source, location)


TILE_FIELDS: tuple[FieldCheck, ...] = (
    FieldCheck("id", "a string", is_string),
    FieldCheck("name", "a string", is_string),
    FieldCheck("description", "a string", is_string),
    FieldCheck("sprites", "an array of strings", is_string_array),
    FieldCheck("isOpaque", "a boolean", is_boolean),
    FieldCheck("isSolid", "a boolean", is_boolean),
)


def validate_tile(
    tile: Any, errors: Optional[List[str]] = None, source: str = "", location: str = ""
) -> List[str]:
    """Append the errors of a tile object to `errors`."""
    return validate_object("tile", TILE_FIELDS, tile, errors, source, location)


CONTENT_FIELDS: tuple[FieldCheck, ...] = (
    FieldCheck("creatures", "an array of Creatures", element=validate_creature),
    FieldCheck("images", "an array of Images", element=validate_image),
    FieldCheck("sprites", "an array of Sprites", element=validate_sprite),
    FieldCheck("tiles", "an array of Tiles", element=validate_tile),
    FieldCheck("worlds", "an array of Worlds", element=validate_world),
)


def validate_content(
    content: Any, errors: Optional[List[str]] = None, source: str = "", location: str = ""
) -> List[str]:
    """Append the errors of a content object to `errors`."""
    return validate_object("content", CONTENT_FIELDS, content, errors, source, location)


def parse_content(
    value: Any, errors: Optional[List[str]] = None, source: str = ""
) -> Content:
    """Validate a parsed JSON value and build a Content from it.

    Args:
        value: Parsed JSON (typically the output of orjson.loads)
        errors: List to append errors to (a new list if None)
        source: Label appended to every error message

    Returns:
        The validated Content

    Raises:
        StructuralError: If the value does not match the schema
    """
    if errors is None:
        errors = []

    before = len(errors)
    validate_content(value, errors, source)
    if len(errors) > before:
        logger.debug(f"Content failed validation with {len(errors) - before} error(s)")
        raise StructuralError(errors)

    return Content.from_dict(value)
