"""Application service: Rename Branch use case."""

from __future__ import annotations

from franchises.application.edit_franchise import FranchiseEditHandler
from franchises.domain.model.franchise import Franchise
from franchises.domain.service import franchise_editor


class RenameBranchHandler(FranchiseEditHandler):

    def handle(
        self, franchise_id: str, old_branch_name: str, new_branch_name: str
    ) -> Franchise | None:
        """Rename every branch called ``old_branch_name``.

        If no branch has that name the franchise is saved unchanged.
        """
        return self._apply(
            franchise_id,
            f"rename branch {old_branch_name!r} to {new_branch_name!r}",
            lambda f: franchise_editor.rename_branch(f, old_branch_name, new_branch_name),
        )
