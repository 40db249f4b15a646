"""Tests for the in-memory host."""

import pytest

from force_structure_name import Entity, EntityNotFoundError, InMemoryHost


class TestInMemoryHost:
    """Tests for InMemoryHost."""

    def test_list_keeps_input_order(self) -> None:
        host = InMemoryHost([Entity("b", "S2"), Entity("a", "S1")])
        assert [e.id for e in host.list_entities()] == ["b", "a"]

    def test_unknown_id_raises(self) -> None:
        host = InMemoryHost([Entity(1, "S1")])
        with pytest.raises(EntityNotFoundError):
            host.get_entity_name(2)
        with pytest.raises(EntityNotFoundError):
            host.set_entity_name(2, "S2")

    def test_report_message_uses_reporter(self) -> None:
        """Messages are recorded and passed to the reporter."""
        seen: list[str] = []
        host = InMemoryHost(reporter=seen.append)
        host.report_message("hello")
        assert seen == ["hello"]
        assert host.messages == ["hello"]

    def test_transaction_commits(self) -> None:
        host = InMemoryHost([Entity(1, "S1")])
        with host.transaction():
            host.set_entity_name(1, "S9")
        assert host.get_entity_name(1) == "S9"

    def test_transaction_rolls_back_on_error(self) -> None:
        """Writes made before an exception are undone."""
        host = InMemoryHost([Entity(1, "S1"), Entity(2, "S2")])
        with pytest.raises(RuntimeError):
            with host.transaction():
                host.set_entity_name(1, "S9")
                raise RuntimeError("boom")
        assert host.get_entity_name(1) == "S1"

    def test_canonical_id(self) -> None:
        """Known ids come back unchanged; unknown ids raise."""
        host = InMemoryHost([Entity(1, "S1")])
        assert host.canonical_id(1) == 1
        with pytest.raises(EntityNotFoundError):
            host.canonical_id("1")
