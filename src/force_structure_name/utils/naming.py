"""Naming and string utility functions."""

from collections.abc import Iterable

from force_structure_name.utils.constants import DEFAULT_CONFIG


def format_replacement_name(
    name: str, counter: int, fmt: str = DEFAULT_CONFIG["suffix_format"]
) -> str:
    """Append a counter suffix to a name, e.g. ``S10`` -> ``S10 (2)``."""
    return fmt.format(name=name, counter=counter)


def name_exists(name: str, names: Iterable[str]) -> bool:
    """Check for an exact, case-sensitive match among names."""
    return any(existing == name for existing in names)
