"""Domain service: product with the most stock in each branch (query)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from franchises.domain.model.franchise import Franchise, Product

logger = logging.getLogger(__name__)


def max_stock_per_branch(franchise: Franchise) -> Iterator[dict[str, Product]]:
    """Yield ``{branch_name: product}`` for every branch, in branch order.

    ``product`` is the one with the highest stock; on a tie the earliest
    product in the branch wins (``max`` keeps the first maximal element).
    Branches without products yield nothing.
    """
    for branch in franchise.branches:
        best = max(branch.products, key=lambda p: p.stock, default=None)
        if best is None:
            logger.debug("No products found for branch %s", branch.name)
            continue
        logger.debug("Found product with most stock for branch %s: %s", branch.name, best.name)
        yield {branch.name: best}
