"""
Force Structure Name
====================
Rename a Civil3D structure even if another structure already has that name.

The structure holding the name is renamed first with a numbered suffix:
renaming a structure to "S10" while another "S10" exists turns the other
one into "S10 (2)" (or "S10 (3)" if "S10 (2)" is taken, and so on).

Usage:
    CLI:
        force-structure-name drawing.json --structure 2A7 --name S10
        force-structure-name drawing.json -s 2A7 -n S10 --dry-run
        force-structure-name duplicates drawing.json

    Python:
        from force_structure_name import Entity, resolve_name
        resolve_name("S10", 2, [Entity(1, "S10"), Entity(2, "S20")])
"""

from importlib.metadata import PackageNotFoundError, version

from force_structure_name.command import RenameOutcome, force_structure_name
from force_structure_name.host import EntityNotFoundError, InMemoryHost, StructureHost
from force_structure_name.resolver import (
    Entity,
    InvalidNameError,
    NameAssignment,
    RenameRequest,
    resolve,
    resolve_name,
)

try:
    __version__ = version("force-structure-name")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "Entity",
    "EntityNotFoundError",
    "InMemoryHost",
    "InvalidNameError",
    "NameAssignment",
    "RenameOutcome",
    "RenameRequest",
    "StructureHost",
    "force_structure_name",
    "resolve",
    "resolve_name",
]
