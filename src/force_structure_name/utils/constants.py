"""Constants and defaults for structure renaming."""

from typing import TypedDict

# Object class name Civil3D reports for pipe network structures
STRUCTURE_CLASS = "AeccDbStructure"

# User-facing messages reported through the host
MESSAGES: dict[str, str] = {
    "conflict": "Structure {old} already exists, changing name to {new}",
    "renamed": "Structure {old} changed to {new}",
    "invalid_name": "Canceled. Invalid name",
    "failed": "Failed to update structure name. {reason}",
    "rejected": "You must select a STRUCTURE",
}


class RenameConfig(TypedDict):
    """Configuration for a structure rename."""

    suffix_start: int
    suffix_format: str
    dry_run: bool


DEFAULT_CONFIG: RenameConfig = {
    "suffix_start": 2,  # First counter tried, e.g. "S10 (2)"
    "suffix_format": "{name} ({counter})",
    "dry_run": False,  # Print the plan without writing
}
