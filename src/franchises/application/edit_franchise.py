"""Shared load -> edit -> save template for every franchise mutation.

The sequence is NOT atomic: two concurrent edits of the same franchise
both load the same version and the second save wins (lost update).  There
is no version field to detect it.
"""

from __future__ import annotations

import logging
from typing import Callable

from franchises.domain.exceptions import StoreError
from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class FranchiseEditHandler:
    """Base class for handlers that change one franchise document."""

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    def _apply(
        self,
        franchise_id: str,
        action: str,
        edit: Callable[[Franchise], Franchise],
    ) -> Franchise | None:
        """Load the franchise, apply ``edit`` and persist the result.

        Returns None when the franchise does not exist.  Store failures
        are logged and re-raised untouched.
        """
        logger.info("Attempting to %s in franchise with ID: %s", action, franchise_id)
        try:
            franchise = self._franchise_repo.get_by_id(franchise_id)
            if franchise is None:
                logger.warning("Franchise with ID %s not found.", franchise_id)
                return None
            saved = self._franchise_repo.save(edit(franchise))
        except StoreError as exc:
            logger.error("Failed to %s in franchise %s: %s", action, franchise_id, exc)
            raise

        logger.info("Successfully completed %s for franchise with ID: %s", action, saved.id)
        return saved
