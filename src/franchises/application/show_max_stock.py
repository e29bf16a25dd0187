"""Application service: Show Max Stock Per Branch use case (query)."""

from __future__ import annotations

import logging

from franchises.domain.exceptions import StoreError
from franchises.domain.model.franchise import Product
from franchises.domain.repository.franchise_repository import FranchiseRepository
from franchises.domain.service.stock_aggregator import max_stock_per_branch

logger = logging.getLogger(__name__)


class ShowMaxStockHandler:

    def __init__(self, franchise_repo: FranchiseRepository) -> None:
        self._franchise_repo = franchise_repo

    def handle(self, franchise_id: str) -> list[dict[str, Product]] | None:
        """Return ``[{branch_name: product}, ...]`` in branch order.

        None when the franchise does not exist; an empty list when it has
        no branch with products.
        """
        logger.info(
            "Attempting to get product with most stock per branch for franchise with ID: %s",
            franchise_id,
        )
        try:
            franchise = self._franchise_repo.get_by_id(franchise_id)
        except StoreError as exc:
            logger.error(
                "Failed to get product with most stock per branch for franchise %s: %s",
                franchise_id,
                exc,
            )
            raise

        if franchise is None:
            logger.warning("Franchise with ID %s not found.", franchise_id)
            return None

        result = list(max_stock_per_branch(franchise))
        logger.info(
            "Completed getting product with most stock per branch for franchise with ID: %s",
            franchise_id,
        )
        return result
