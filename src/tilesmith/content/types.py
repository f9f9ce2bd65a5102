"""
Result types and exceptions for the content layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class StructuralError(ValueError):
    """Raised when a value does not conform to the content schema.

    The message is the newline-joined list of validator errors; the list
    itself is kept in `errors`.
    """

    def __init__(self, errors: List[str]):
        super().__init__("\n".join(errors))
        self.errors = list(errors)


class RegistryError(Enum):
    """Reasons a registry operation can be refused."""

    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_COORDINATE = "invalid_coordinate"


@dataclass
class RegistryResult:
    """Outcome of a registry insert or delete.

    Truthy when the operation succeeded. On failure `error` tells why and
    `message` renders a human readable description.
    """

    ok: bool
    kind: str
    key: Any
    error: Optional[RegistryError] = None
    index: Optional[int] = None

    @classmethod
    def success(cls, kind: str, key: Any, index: int) -> "RegistryResult":
        return cls(ok=True, kind=kind, key=key, index=index)

    @classmethod
    def failure(cls, kind: str, key: Any, error: RegistryError) -> "RegistryResult":
        return cls(ok=False, kind=kind, key=key, error=error)

    def __bool__(self) -> bool:
        return self.ok

    @property
    def message(self) -> str:
        """Describe the outcome; empty when successful."""
        if self.error is None:
            return ""
        # Chunks are keyed by coordinates, everything else by id
        key_name = "x y" if isinstance(self.key, tuple) else "id"
        if self.error == RegistryError.DUPLICATE_KEY:
            return f"{self.kind} {key_name} already exists"
        if self.error == RegistryError.NOT_FOUND:
            return f"{self.kind} {key_name} does not exist"
        return f"{self.kind} {key_name} is not an integer"


@dataclass
class ValidationResult:
    """Result of cross-entity content checks."""

    is_valid: bool
    errors: List[str] = field(default_factory=lambda: [])
    warnings: List[str] = field(default_factory=lambda: [])
