"""Tests for duplicate name analysis module."""

from force_structure_name.analyzers import analyze_duplicate_names
from force_structure_name.resolver import Entity


class TestAnalyzeDuplicateNames:
    """Tests for analyze_duplicate_names function."""

    def test_no_duplicates(self, structures: list[Entity]) -> None:
        """Unique names should return an empty list."""
        assert analyze_duplicate_names(structures) == []

    def test_empty(self) -> None:
        assert analyze_duplicate_names([]) == []

    def test_exact_duplicates_grouped(self) -> None:
        """Each shared name is reported once with all of its holders."""
        entities = [
            Entity(1, "S10"),
            Entity(2, "S20"),
            Entity(3, "S10"),
            Entity(4, "S20"),
            Entity(5, "S10"),
        ]
        assert analyze_duplicate_names(entities) == [
            {"name": "S10", "count": 3, "entity_ids": [1, 3, 5]},
            {"name": "S20", "count": 2, "entity_ids": [2, 4]},
        ]

    def test_case_differences_not_duplicates(self) -> None:
        entities = [Entity(1, "MH-1"), Entity(2, "mh-1")]
        assert analyze_duplicate_names(entities) == []
