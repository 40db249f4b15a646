"""Host collaborator interface and an in-memory implementation."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import AbstractContextManager, contextmanager
from typing import Protocol

from force_structure_name.resolver import Entity, EntityId
from force_structure_name.utils.logging import log_info

Reporter = Callable[[str], None]


class EntityNotFoundError(LookupError):
    """Raised when an id does not refer to a structure known to the host."""


class StructureHost(Protocol):
    """What the rename command needs from a CAD host.

    ``transaction()`` must make the writes done inside it all-or-nothing:
    committed when the block exits normally, discarded when it raises.
    ``canonical_id()`` returns the id in the form ``list_entities()`` uses.
    """

    def canonical_id(self, entity_id: EntityId) -> EntityId: ...

    def get_entity_name(self, entity_id: EntityId) -> str: ...

    def set_entity_name(self, entity_id: EntityId, name: str) -> None: ...

    def list_entities(self) -> list[Entity]: ...

    def report_message(self, message: str) -> None: ...

    def transaction(self) -> AbstractContextManager[None]: ...


class InMemoryHost:
    """Structures held in a dict, for embedding the command and for tests."""

    def __init__(
        self,
        entities: Iterable[Entity] = (),
        reporter: Reporter | None = None,
    ) -> None:
        self._names: dict[EntityId, str] = {e.id: e.name for e in entities}
        self._reporter = reporter or log_info
        self.messages: list[str] = []

    def canonical_id(self, entity_id: EntityId) -> EntityId:
        if entity_id not in self._names:
            raise EntityNotFoundError(entity_id)
        return entity_id

    def get_entity_name(self, entity_id: EntityId) -> str:
        try:
            return self._names[entity_id]
        except KeyError:
            raise EntityNotFoundError(entity_id) from None

    def set_entity_name(self, entity_id: EntityId, name: str) -> None:
        if entity_id not in self._names:
            raise EntityNotFoundError(entity_id)
        self._names[entity_id] = name

    def list_entities(self) -> list[Entity]:
        return [Entity(entity_id, name) for entity_id, name in self._names.items()]

    def report_message(self, message: str) -> None:
        self.messages.append(message)
        self._reporter(message)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Restore every name if the block raises."""
        saved = dict(self._names)
        try:
            yield
        except BaseException:
            self._names = saved
            raise
