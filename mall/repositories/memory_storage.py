"""In-memory store with the same contract as ``JsonStore`` (no file I/O)."""

from __future__ import annotations

import copy

from mall.repositories.json_storage import DocumentStore, db_defaults, empty_document


class MemoryStore(DocumentStore):
    def __init__(self, db: dict | None = None) -> None:
        super().__init__()
        self._db = db_defaults(copy.deepcopy(db)) if db is not None else empty_document()

    def load(self) -> dict:
        with self._lock:
            return copy.deepcopy(self._db)

    def save(self, db: dict) -> None:
        with self._lock:
            self._db = copy.deepcopy(db)
