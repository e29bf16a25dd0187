"""Application service: List Franchises use case (query)."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import StoreError
from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository

logger = logging.getLogger(__name__)


class ListFranchisesHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    def handle(self) -> list[Franchise]:
        logger.info("Attempting to retrieve all franchises.")
        try:
            franchises = self._franchise_repo.list_all()
        except StoreError as exc:
            logger.error("Failed to retrieve all franchises: %s", exc)
            raise
        logger.info("Successfully retrieved %d franchises.", len(franchises))
        return franchises
