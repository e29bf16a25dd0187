"""Application service: Add Product use case."""

from __future__ import annotations

from franchises.application.edit_franchise import FranchiseEditHandler
from franchises.domain.model.franchise import Franchise, Product
from franchises.domain.service import franchise_editor


class AddProductHandler(FranchiseEditHandler):

    def handle(
        self, franchise_id: str, branch_name: str, product: Product
    ) -> Franchise | None:
        """Append a product to the named branch.

        An unknown branch is NOT created; the franchise comes back
        unchanged.
        """
        return self._apply(
            franchise_id,
            f"add product {product.name!r} to branch {branch_name!r}",
            lambda f: franchise_editor.append_product(f, branch_name, product),
        )
