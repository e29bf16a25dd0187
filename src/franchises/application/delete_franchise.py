"""Application service: Delete Franchise use case.

Deletion goes straight to the store; no editing logic is involved.
"""

from __future__ import annotations

import logging

from franchises.domain.exceptions import StoreError
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class DeleteFranchiseHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    def handle(self, franchise_id: str) -> bool:
        """Delete a franchise. Returns False if it did not exist."""
        logger.info("Attempting to delete franchise with ID: %s", franchise_id)
        try:
            deleted = self._franchise_repo.delete_by_id(franchise_id)
        except StoreError as exc:
            logger.error("Failed to delete franchise %s: %s", franchise_id, exc)
            raise

        if deleted:
            logger.info("Successfully deleted franchise with ID: %s", franchise_id)
        else:
            logger.warning("Franchise with ID %s not found.", franchise_id)
        return deleted
