"""The ForceStructureName command.

Renames one structure, moving any other structure that already holds the
requested name out of the way first. All host access goes through a
StructureHost so the same flow runs inside Civil3D, over a snapshot file,
or in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from force_structure_name.host import EntityNotFoundError, StructureHost
from force_structure_name.resolver import (
    EntityId,
    InvalidNameError,
    NameAssignmentPlan,
    RenameRequest,
    resolve,
)
from force_structure_name.utils.constants import DEFAULT_CONFIG, MESSAGES, RenameConfig

RenameStatus = Literal["renamed", "planned", "canceled", "rejected", "failed"]


@dataclass
class RenameOutcome:
    """What happened when the command ran."""

    status: RenameStatus
    target_id: EntityId
    old_name: str | None = None
    plan: NameAssignmentPlan = field(default_factory=list)
    # Names held before the rename, keyed by entity id, for everything in plan
    previous_names: dict[EntityId, str] = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status in ("renamed", "planned")


def _report(host: StructureHost, outcome: RenameOutcome, message: str) -> None:
    outcome.messages.append(message)
    host.report_message(message)


def _plan(
    host: StructureHost, request: RenameRequest, config: RenameConfig
) -> tuple[NameAssignmentPlan, dict[EntityId, str]]:
    entities = host.list_entities()
    plan = resolve(
        request,
        entities,
        suffix_start=config["suffix_start"],
        suffix_format=config["suffix_format"],
    )
    current = {entity.id: entity.name for entity in entities}
    previous = {a.entity_id: current.get(a.entity_id, "") for a in plan}
    previous[request.target_id] = host.get_entity_name(request.target_id)
    return plan, previous


def force_structure_name(
    host: StructureHost,
    target_id: EntityId,
    desired_name: str,
    config: RenameConfig = DEFAULT_CONFIG,
) -> RenameOutcome:
    """
    Rename a structure, resolving a name conflict with another structure.

    The plan is applied inside ``host.transaction()``; if any write fails the
    transaction rolls back and the outcome is ``failed``. With
    ``config["dry_run"]`` the plan is computed and returned as ``planned``
    without opening a transaction.
    """
    outcome = RenameOutcome(status="rejected", target_id=target_id)

    try:
        target_id = host.canonical_id(target_id)
        outcome.old_name = host.get_entity_name(target_id)
    except EntityNotFoundError:
        _report(host, outcome, MESSAGES["rejected"])
        return outcome

    outcome.target_id = target_id
    request = RenameRequest(target_id, desired_name)

    if config["dry_run"]:
        try:
            outcome.plan, outcome.previous_names = _plan(host, request, config)
        except InvalidNameError:
            outcome.status = "canceled"
            _report(host, outcome, MESSAGES["invalid_name"])
            return outcome
        outcome.status = "planned"
        return outcome

    try:
        with host.transaction():
            plan, previous = _plan(host, request, config)
            for assignment in plan:
                host.set_entity_name(assignment.entity_id, assignment.new_name)
    except InvalidNameError:
        outcome.status = "canceled"
        _report(host, outcome, MESSAGES["invalid_name"])
        return outcome
    except Exception as e:
        outcome.status = "failed"
        _report(host, outcome, MESSAGES["failed"].format(reason=e))
        return outcome

    outcome.status = "renamed"
    outcome.plan = plan
    outcome.previous_names = previous

    # Conflict messages come before the target message
    for assignment in plan[1:]:
        _report(
            host,
            outcome,
            MESSAGES["conflict"].format(
                old=previous[assignment.entity_id], new=assignment.new_name
            ),
        )
    _report(
        host,
        outcome,
        MESSAGES["renamed"].format(old=outcome.old_name, new=desired_name),
    )
    return outcome
