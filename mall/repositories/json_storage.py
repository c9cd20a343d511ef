"""
JSON-file persistence adapter.

The whole directory lives in a single document::

    {"shops": [...], "employees": [...]}

Every operation reads the full document and, for writes, replaces it in full.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
import json
import logging
import os
import tempfile
import threading

logger = logging.getLogger(__name__)

COLLECTIONS = ("shops", "employees")


class StorageError(IOError):
    """Raised when the persisted document cannot be read or written."""


def empty_document() -> dict:
    return {name: [] for name in COLLECTIONS}


def db_defaults(db: dict) -> dict:
    for name in COLLECTIONS:
        db.setdefault(name, [])
    return db


class DocumentStore:
    """Base class for stores; subclasses implement ``load`` and ``save``."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def load(self) -> dict:
        raise NotImplementedError

    def save(self, db: dict) -> None:
        raise NotImplementedError

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Serialise a load-mutate-save cycle against other writers of this store."""
        with self._lock:
            yield


class JsonStore(DocumentStore):
    """Stores the document as pretty-printed UTF-8 JSON at ``path``."""

    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__()
        self.path = Path(path)

    def load(self) -> dict:
        with self._lock:
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    db = json.load(f)
            except (FileNotFoundError, NotADirectoryError):
                db = empty_document()
                self.save(db)
                logger.info("Initialised empty data file at %s", self.path)
                return db
            except (OSError, ValueError) as exc:
                raise StorageError(f"Could not read {self.path}: {exc}") from exc
            if not isinstance(db, dict):
                raise StorageError(f"Could not read {self.path}: top-level value is not an object")
            db = db_defaults(db)
            for name in COLLECTIONS:
                records = db[name]
                if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
                    raise StorageError(f"Could not read {self.path}: \"{name}\" is not a list of objects")
            return db

    def save(self, db: dict) -> None:
        payload = json.dumps(db, ensure_ascii=False, indent=2)
        with self._lock:
            tmp_name = None
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except OSError as exc:
                if tmp_name and os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise StorageError(f"Could not write {self.path}: {exc}") from exc
