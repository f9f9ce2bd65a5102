"""
Reading and writing content files.

Content is stored as indented JSON. Chunk data arrays hold a thousand
integers each, so they are written on a single line to keep the file
readable.
"""

import logging
import re
import secrets
from pathlib import Path
from typing import List, Optional

import orjson

from .models import Content
from .schema import parse_content
from .types import StructuralError

logger = logging.getLogger(__name__)


def stringify_content(content: Content) -> str:
    """Serialize content to 2-space indented JSON with one-line chunk data."""
    data = content.to_dict()

    # Swap every chunk's data for a unique marker, then splice the compact
    # array text back in after indentation
    marker = f"chunk-data-{secrets.token_hex(8)}"
    rendered: List[str] = []
    for world in data["worlds"]:
        for chunk in world["chunks"]:
            # orjson cannot read back long runs of "0,0,0"; values are ", " separated
            rendered.append("[" + ", ".join(str(value) for value in chunk["data"]) + "]")
            chunk["data"] = f"{marker}-{len(rendered) - 1}"

    text = orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")
    return re.sub(
        rf'"{marker}-(\d+)"', lambda match: rendered[int(match.group(1))], text
    )


def read_content(
    path: Path, errors: Optional[List[str]] = None, source: str = ""
) -> Content:
    """Read and validate a content file.

    Args:
        path: Path to the content JSON file
        errors: List to append validation errors to
        source: Label appended to every error message

    Returns:
        The validated Content

    Raises:
        OSError: If the file cannot be read
        StructuralError: If the file is not valid JSON or fails validation
    """
    if errors is None:
        errors = []

    raw = Path(path).read_bytes()
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        errors.append(f"content is not valid JSON: {e}{source}")
        raise StructuralError(errors) from e

    content = parse_content(data, errors, source)
    logger.debug(f"Read content from {path}")
    return content


def write_content(path: Path, content: Content) -> None:
    """Write content to a file as UTF-8 JSON."""
    Path(path).write_text(stringify_content(content), encoding="utf-8")
    logger.debug(f"Wrote content to {path}")
