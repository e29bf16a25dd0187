"""JSON-file-backed implementation of FranchiseRepository.

The file holds a list of franchise documents.  Every call re-reads the
file, so several processes may share it; within one process the
read-modify-write of the file is serialized by a lock.
"""

from __future__ import annotations

import json
import logging
import threading
import uuid
from dataclasses import replace
from pathlib import Path

from franchises.domain.exceptions import StoreError
from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository
from franchises.infrastructure.persistence.documents import from_document, to_document

logger = logging.getLogger(__name__)


class JsonFranchiseRepository(FranchiseRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- FranchiseRepository interface ----------------------------------------

    def get_by_id(self, franchise_id: str) -> Franchise | None:
        with self._lock:
            for raw in self._load_raw():
                if raw["id"] == franchise_id:
                    return from_document(raw)
        return None

    def list_all(self) -> list[Franchise]:
        with self._lock:
            return [from_document(raw) for raw in self._load_raw()]

    def save(self, franchise: Franchise) -> Franchise:
        if franchise.id is None:
            franchise = replace(franchise, id=uuid.uuid4().hex)

        with self._lock:
            records = self._load_raw()

            # Upsert: replace if exists, otherwise append
            replaced = False
            for i, raw in enumerate(records):
                if raw["id"] == franchise.id:
                    records[i] = to_document(franchise)
                    replaced = True
                    break
            if not replaced:
                records.append(to_document(franchise))

            self._persist_raw(records)
        return franchise

    def delete_by_id(self, franchise_id: str) -> bool:
        with self._lock:
            records = self._load_raw()
            remaining = [raw for raw in records if raw["id"] != franchise_id]
            if len(remaining) == len(records):
                return False
            self._persist_raw(remaining)
        return True

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreError(f"Cannot read {self._file_path}: {exc}") from exc

        if not isinstance(records, list) or not all(
            isinstance(raw, dict) and "id" in raw for raw in records
        ):
            raise StoreError(
                f"Cannot read {self._file_path}: expected a list of franchise documents"
            )
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        # the file is swapped in whole; readers never see a partial write
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            tmp_path.replace(self._file_path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StoreError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            logger.info("Creating empty franchise store at %s", self._file_path)
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise StoreError(f"Cannot create {self._file_path}: {exc}") from exc
