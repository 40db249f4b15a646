"""Analyzers for structure names."""

from force_structure_name.analyzers.duplicates import (
    DuplicateName,
    analyze_duplicate_names,
)

__all__ = [
    "DuplicateName",
    "analyze_duplicate_names",
]
