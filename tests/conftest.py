"""Pytest fixtures for force-structure-name tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from force_structure_name import Entity, InMemoryHost


@pytest.fixture
def structures() -> list[Entity]:
    """Three structures, one of them already named S10."""
    return [Entity(1, "S10"), Entity(2, "S20"), Entity(3, "S30")]


@pytest.fixture
def host(structures: list[Entity]) -> InMemoryHost:
    """In-memory host that records messages without printing."""
    return InMemoryHost(structures, reporter=lambda _msg: None)


@pytest.fixture
def drawing_file(tmp_path: Path) -> Path:
    """Drawing snapshot with structures mixed in among other entities."""
    document = {
        "drawing": "network.dwg",
        "entities": [
            {"id": "2A7", "class": "AeccDbStructure", "name": "S10", "layer": "C-STRM"},
            {"id": "2A8", "class": "AeccDbPipe", "name": "S20"},
            {"id": "2A9", "class": "AeccDbStructure", "name": "S20"},
            {"id": 42, "class": "AeccDbStructure", "name": "S10 (2)"},
        ],
    }
    path = tmp_path / "drawing.json"
    path.write_text(json.dumps(document, indent=2), encoding="utf-8")
    return path


def _read_names(path: Path) -> dict[str, str]:
    document = json.loads(path.read_text(encoding="utf-8"))
    return {str(e["id"]): e["name"] for e in document["entities"]}


@pytest.fixture
def read_names() -> Callable[[Path], dict[str, str]]:
    """Map entity id (as string) to name for every entity in a snapshot."""
    return _read_names
