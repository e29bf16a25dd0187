"""Application service: Add Branch use case."""

from __future__ import annotations

from franchises.application.edit_franchise import FranchiseEditHandler
from franchises.domain.model.franchise import Branch, Franchise
from franchises.domain.service import franchise_editor


class AddBranchHandler(FranchiseEditHandler):

    def handle(self, franchise_id: str, branch: Branch) -> Franchise | None:
        """Append a branch (and any products it carries) to the franchise.

        A branch with an existing name is appended anyway.
        """
        return self._apply(
            franchise_id,
            f"add branch {branch.name!r}",
            lambda f: franchise_editor.append_branch(f, branch),
        )
