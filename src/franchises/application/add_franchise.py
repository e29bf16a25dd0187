"""Application service: Add Franchise use case."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import StoreError
from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class AddFranchiseHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    def handle(self, franchise: Franchise) -> Franchise:
        """Persist a new franchise, with whatever branches it already carries.

        The store assigns an ID if the caller did not supply one.  A
        caller-supplied ID that already exists is overwritten.
        """
        logger.info("Attempting to add new franchise: %s", franchise.name)
        try:
            saved = self._franchise_repo.save(franchise)
        except StoreError as exc:
            logger.error("Failed to add franchise %s: %s", franchise.name, exc)
            raise
        logger.info("Successfully added franchise with ID: %s", saved.id)
        return saved
