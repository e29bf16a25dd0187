"""Application service: Delete Product use case."""

from __future__ import annotations

from franchises.application.edit_franchise import FranchiseEditHandler
from franchises.domain.model.franchise import Franchise
from franchises.domain.service import franchise_editor


class DeleteProductHandler(FranchiseEditHandler):

    def handle(
        self, franchise_id: str, branch_name: str, product_name: str
    ) -> Franchise | None:
        """Remove all products named ``product_name`` from the branch."""
        return self._apply(
            franchise_id,
            f"delete product {product_name!r} from branch {branch_name!r}",
            lambda f: franchise_editor.remove_product(f, branch_name, product_name),
        )
