"""
Configuration type definitions and exceptions for tilesmith.
"""

from enum import Enum

from ..content.types import ValidationResult


class ConfigVersion(Enum):
    """Configuration version for migration support."""
    V1_0 = "1.0"
    V1_1 = "1.1"
    CURRENT = V1_1


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be accessed."""
    pass


__all__ = ["ConfigVersion", "ConfigError", "ValidationResult"]
