"""Application service: Show Franchise use case (query)."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import StoreError
from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class ShowFranchiseHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    def handle(self, franchise_id: str) -> Franchise | None:
        """Return the franchise, or None if the ID does not resolve."""
        logger.info("Attempting to retrieve franchise by ID: %s", franchise_id)
        try:
            franchise = self._franchise_repo.get_by_id(franchise_id)
        except StoreError as exc:
            logger.error("Failed to retrieve franchise with ID %s: %s", franchise_id, exc)
            raise

        if franchise is None:
            logger.warning("Franchise with ID %s not found.", franchise_id)
        else:
            logger.info("Successfully retrieved franchise with ID: %s", franchise_id)
        return franchise
