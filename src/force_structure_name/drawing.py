"""Drawing snapshot host.

Lets the rename command run against a JSON export of a drawing's entities
instead of a live Civil3D session. The file looks like::

    {
      "entities": [
        {"id": "2A7", "class": "AeccDbStructure", "name": "S10"},
        {"id": "2A8", "class": "AeccDbPipe", "name": "P1"}
      ]
    }

Only entities of the structure class take part in renames. Ids are compared
as strings so ``2`` in the file and ``"2"`` on the command line match.
Extra keys on entities and on the document are kept as they are on save.
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from force_structure_name.host import EntityNotFoundError, Reporter
from force_structure_name.resolver import Entity, EntityId
from force_structure_name.utils.constants import STRUCTURE_CLASS
from force_structure_name.utils.logging import log_info


class DrawingFormatError(RuntimeError):
    """Raised when a snapshot file cannot be read or has the wrong layout."""


def load_drawing(path: str | Path) -> dict[str, Any]:
    """Read and validate a drawing snapshot file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise DrawingFormatError(f"Cannot read {path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise DrawingFormatError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(document, dict) or not isinstance(
        document.get("entities"), list
    ):
        raise DrawingFormatError(f"{path}: expected an object with an 'entities' list")

    for index, record in enumerate(document["entities"]):
        if not isinstance(record, dict):
            raise DrawingFormatError(f"{path}: entity #{index} is not an object")
        if "id" not in record:
            raise DrawingFormatError(f"{path}: entity #{index} has no 'id'")
        if not isinstance(record.get("name"), str):
            raise DrawingFormatError(f"{path}: entity #{index} has no string 'name'")

    return document


def save_drawing(document: dict[str, Any], path: str | Path) -> None:
    """Write a snapshot atomically (temp file in the same folder, then replace)."""
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class DrawingSnapshotHost:
    """StructureHost over a drawing snapshot file.

    Name writes go to an in-memory copy of the document. The file is written
    when a transaction commits (to ``output_path`` if given, otherwise back to
    ``path``), unless ``persist`` is False.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        output_path: str | Path | None = None,
        structure_class: str = STRUCTURE_CLASS,
        reporter: Reporter | None = None,
        persist: bool = True,
    ) -> None:
        self.path = Path(path)
        self.output_path = Path(output_path) if output_path else self.path
        self.structure_class = structure_class
        self.persist = persist
        self.document = load_drawing(self.path)
        self.messages: list[str] = []
        self._reporter = reporter or log_info

    def _structures(self) -> list[dict[str, Any]]:
        return [
            record
            for record in self.document["entities"]
            if record.get("class") == self.structure_class
        ]

    def _find(self, entity_id: EntityId) -> dict[str, Any]:
        key = str(entity_id)
        for record in self._structures():
            if str(record["id"]) == key:
                return record
        raise EntityNotFoundError(entity_id)

    def canonical_id(self, entity_id: EntityId) -> EntityId:
        return str(self._find(entity_id)["id"])

    def get_entity_name(self, entity_id: EntityId) -> str:
        return self._find(entity_id)["name"]

    def set_entity_name(self, entity_id: EntityId, name: str) -> None:
        self._find(entity_id)["name"] = name

    def list_entities(self) -> list[Entity]:
        return [Entity(str(r["id"]), r["name"]) for r in self._structures()]

    def report_message(self, message: str) -> None:
        self.messages.append(message)
        self._reporter(message)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Save on normal exit; put the in-memory document back on error."""
        saved = copy.deepcopy(self.document)
        try:
            yield
            if self.persist:
                save_drawing(self.document, self.output_path)
        except BaseException:
            self.document = saved
            raise
