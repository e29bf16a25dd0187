"""Dict-backed implementation of FranchiseRepository.

Franchises are frozen values, so the stored objects can be handed out
directly without copying.
"""

from __future__ import annotations

import uuid
from dataclasses import replace

from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository


class InMemoryFranchiseRepository(FranchiseRepository):

    def __init__(self, franchises: list[Franchise] | None = None) -> None:
        self._store: dict[str, Franchise] = {}
        for f in franchises or []:
            self.save(f)

    def get_by_id(self, franchise_id: str) -> Franchise | None:
        return self._store.get(franchise_id)

    def list_all(self) -> list[Franchise]:
        return list(self._store.values())

    def save(self, franchise: Franchise) -> Franchise:
        if franchise.id is None:
            franchise = replace(franchise, id=uuid.uuid4().hex)
        self._store[franchise.id] = franchise
        return franchise

    def delete_by_id(self, franchise_id: str) -> bool:
        return self._store.pop(franchise_id, None) is not None
