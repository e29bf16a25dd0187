"""Application service: Set Product Stock use case."""

from __future__ import annotations

from franchises.application.edit_franchise import FranchiseEditHandler
from franchises.domain.model.franchise import Franchise
from franchises.domain.service import franchise_editor


class SetProductStockHandler(FranchiseEditHandler):

    def handle(
        self, franchise_id: str, branch_name: str, product_name: str, new_stock: int
    ) -> Franchise | None:
        """Overwrite the stock of a product. Negative values are accepted."""
        return self._apply(
            franchise_id,
            f"set stock of product {product_name!r} in branch {branch_name!r} to {new_stock}",
            lambda f: franchise_editor.set_product_stock(
                f, branch_name, product_name, new_stock
            ),
        )
