"""Duplicate structure name detection."""

from collections import Counter
from collections.abc import Sequence
from typing import TypedDict

from force_structure_name.resolver import Entity, EntityId


class DuplicateName(TypedDict):
    """A name held by more than one structure."""

    name: str
    count: int
    entity_ids: list[EntityId]


def analyze_duplicate_names(entities: Sequence[Entity]) -> list[DuplicateName]:
    """
    Find structure names that are held by more than one entity.

    A rename only moves the first conflicting structure out of the way, so
    drawings that already had duplicates can still have some afterwards.
    Results keep the order in which each name first appears.
    """
    counts = Counter(entity.name for entity in entities)
    duplicates: list[DuplicateName] = []
    seen: set[str] = set()

    for entity in entities:
        name = entity.name
        if counts[name] < 2 or name in seen:
            continue
        seen.add(name)
        duplicates.append({
            "name": name,
            "count": counts[name],
            "entity_ids": [e.id for e in entities if e.name == name],
        })

    return duplicates
