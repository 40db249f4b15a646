"""Shared helpers: naming, constants and console output."""

from force_structure_name.utils.constants import (
    DEFAULT_CONFIG,
    MESSAGES,
    STRUCTURE_CLASS,
    RenameConfig,
)
from force_structure_name.utils.naming import format_replacement_name, name_exists

__all__ = [
    "DEFAULT_CONFIG",
    "MESSAGES",
    "STRUCTURE_CLASS",
    "RenameConfig",
    "format_replacement_name",
    "name_exists",
]
