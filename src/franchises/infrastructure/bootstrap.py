"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from franchises.domain.repository.franchise_repository import FranchiseRepository
from franchises.infrastructure.config import Settings, get_settings
from franchises.infrastructure.persistence.in_memory_franchise_repository import (
    InMemoryFranchiseRepository,
)
from franchises.infrastructure.persistence.json_franchise_repository import (
    JsonFranchiseRepository,
)


def franchise_repository(settings: Settings | None = None) -> FranchiseRepository:
    settings = settings or get_settings()
    if settings.store == "memory":
        return InMemoryFranchiseRepository()
    return JsonFranchiseRepository(settings.data_file)
