"""JSON document store backing the catalog and meal plans.

The whole catalog lives in one JSON file:

    {
      "ingredients": [...], "recipes": [...], "recipe_ingredients": [...],
      "meal_plans": [...], "meal_plan_recipes": [...],
      "sequences": {"<table>": <last id>, ...}
    }

Writers go through transaction(): changes are staged on a private copy of the
document and published with a single atomic file replace when the block exits
cleanly. Any exception inside the block discards the staged copy, so readers
never observe a half-written unit of work.
"""
from __future__ import annotations
import json
import logging
import os
import tempfile
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Iterator, List

from mealplan.domain.errors import PersistenceError

logger = logging.getLogger(__name__)

TABLES = ("ingredients", "recipes", "recipe_ingredients", "meal_plans", "meal_plan_recipes")


def _empty_document() -> Dict[str, Any]:
    doc: Dict[str, Any] = {table: [] for table in TABLES}
    doc["sequences"] = {table: 0 for table in TABLES}
    return doc


class Transaction:
    """Staged view of the document handed to a transaction() block."""

    def __init__(self, doc: Dict[str, Any]):
        self.doc = doc

    def rows(self, table: str) -> List[Dict[str, Any]]:
        return self.doc[table]

    def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        '''Append a row, assigning the next id and a creation timestamp. Returns the stored row.'''
        sequences = self.doc["sequences"]
        sequences[table] = sequences.get(table, 0) + 1
        stored = dict(row)
        stored["id"] = sequences[table]
        stored["created_at"] = datetime.now().isoformat()
        self.doc[table].append(stored)
        return stored

    def update(self, table: str, row_id: int, **fields) -> Dict[str, Any]:
        for row in self.doc[table]:
            if row["id"] == row_id:
                row.update(fields)
                return row
        raise KeyError(f"No row {row_id} in {table}")


class JsonStore:
    def __init__(self, path):
        self.path = Path(path)
        self._lock = Lock()

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                doc = json.load(f) or {}
        except FileNotFoundError:
            return _empty_document()
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read catalog store {self.path}: {e}")
            raise PersistenceError(f"Cannot read catalog store {self.path}: {e}") from e
        for table in TABLES:
            doc.setdefault(table, [])
        sequences = doc.setdefault("sequences", {})
        for table in TABLES:
            sequences.setdefault(table, max((r["id"] for r in doc[table]), default=0))
        return doc

    def _atomic_write(self, doc: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".catalog_", suffix=".json")
        except OSError as e:
            logger.error(f"Failed to write catalog store {self.path}: {e}")
            raise PersistenceError(f"Cannot write catalog store {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(doc, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to write catalog store {self.path}: {e}")
            raise PersistenceError(f"Cannot write catalog store {self.path}: {e}") from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def snapshot(self) -> Dict[str, Any]:
        '''Return the committed document. Callers may read it freely; it is never written back.'''
        return self._load()

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        with self._lock:
            tx = Transaction(self._load())
            yield tx
            self._atomic_write(tx.doc)


__all__ = ['JsonStore', 'Transaction', 'TABLES']
