"""Application services: rename a product or change its price."""

from __future__ import annotations

from franchises.application.edit_franchise import FranchiseEditHandler
from franchises.domain.model.franchise import Franchise
from franchises.domain.service import franchise_editor


class RenameProductHandler(FranchiseEditHandler):

    def handle(
        self,
        franchise_id: str,
        branch_name: str,
        old_product_name: str,
        new_product_name: str,
    ) -> Franchise | None:
        return self._apply(
            franchise_id,
            f"rename product {old_product_name!r} in branch {branch_name!r} "
            f"to {new_product_name!r}",
            lambda f: franchise_editor.rename_product(
                f, branch_name, old_product_name, new_product_name
            ),
        )


class SetProductPriceHandler(FranchiseEditHandler):

    def handle(
        self, franchise_id: str, branch_name: str, product_name: str, new_price: float
    ) -> Franchise | None:
        return self._apply(
            franchise_id,
            f"set price of product {product_name!r} in branch {branch_name!r} to {new_price}",
            lambda f: franchise_editor.set_product_price(
                f, branch_name, product_name, new_price
            ),
        )
