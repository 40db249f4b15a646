"""Name collision resolution for structure renames.

Given a desired name and a snapshot of sibling entities, work out which
names have to change so the target can take the desired name. Nothing here
talks to a host; applying the plan is the caller's job.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from force_structure_name.utils.constants import DEFAULT_CONFIG
from force_structure_name.utils.naming import format_replacement_name, name_exists

EntityId: TypeAlias = Hashable


class InvalidNameError(ValueError):
    """Raised when the desired name is empty."""


@dataclass(frozen=True)
class Entity:
    """A named drawing object as seen at the time of the snapshot."""

    id: EntityId
    name: str


@dataclass(frozen=True)
class RenameRequest:
    target_id: EntityId
    desired_name: str


@dataclass(frozen=True)
class NameAssignment:
    """One name write: set ``entity_id``'s name to ``new_name``."""

    entity_id: EntityId
    new_name: str


NameAssignmentPlan: TypeAlias = list[NameAssignment]


def find_conflict(
    desired_name: str, target_id: EntityId, entities: Sequence[Entity]
) -> Entity | None:
    """Return the first entity other than the target already named desired_name."""
    for entity in entities:
        if entity.id == target_id:
            continue
        if entity.name == desired_name:
            return entity
    return None


def next_available_name(
    conflict: Entity,
    entities: Sequence[Entity],
    start: int = DEFAULT_CONFIG["suffix_start"],
    fmt: str = DEFAULT_CONFIG["suffix_format"],
) -> str:
    """
    Find the lowest counter suffix for the conflicting entity's name that no
    other entity uses. Terminates after at most len(entities) + 1 candidates.
    """
    taken = [entity.name for entity in entities if entity.id != conflict.id]
    counter = start
    candidate = format_replacement_name(conflict.name, counter, fmt)
    while name_exists(candidate, taken):
        counter += 1
        candidate = format_replacement_name(conflict.name, counter, fmt)
    return candidate


def resolve(
    request: RenameRequest,
    entities: Sequence[Entity],
    *,
    suffix_start: int = DEFAULT_CONFIG["suffix_start"],
    suffix_format: str = DEFAULT_CONFIG["suffix_format"],
) -> NameAssignmentPlan:
    """
    Build the name assignment plan for a rename request.

    The target always comes first and receives exactly the desired name.
    If another entity already holds that name, the first one found (in
    input order) is renamed to ``"<name> (<n>)"`` with the lowest free n.
    Any further entities sharing the desired name are left alone.

    Raises InvalidNameError if the desired name is empty, and ValueError if
    suffix_format does not change with the counter.
    """
    if not request.desired_name:
        raise InvalidNameError("Desired name must not be empty")
    if format_replacement_name("", suffix_start, suffix_format) == (
        format_replacement_name("", suffix_start + 1, suffix_format)
    ):
        raise ValueError(f"Suffix format {suffix_format!r} must use {{counter}}")

    plan: NameAssignmentPlan = [
        NameAssignment(request.target_id, request.desired_name)
    ]

    conflict = find_conflict(request.desired_name, request.target_id, entities)
    if conflict is not None:
        replacement = next_available_name(
            conflict, entities, start=suffix_start, fmt=suffix_format
        )
        plan.append(NameAssignment(conflict.id, replacement))

    return plan


def resolve_name(
    desired_name: str, target_id: EntityId, entities: Sequence[Entity]
) -> NameAssignmentPlan:
    """Shorthand for ``resolve(RenameRequest(target_id, desired_name), entities)``."""
    return resolve(RenameRequest(target_id, desired_name), entities)
