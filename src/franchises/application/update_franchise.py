"""Application services: edit the scalar fields of a franchise.

No validation is applied to the new values; an empty string is accepted.
"""

from __future__ import annotations

from franchises.application.edit_franchise import FranchiseEditHandler
from franchises.domain.model.franchise import Franchise
from franchises.domain.service import franchise_editor


class RenameFranchiseHandler(FranchiseEditHandler):

    def handle(self, franchise_id: str, new_name: str) -> Franchise | None:
        return self._apply(
            franchise_id,
            f"update name to {new_name!r}",
            lambda f: franchise_editor.rename_franchise(f, new_name),
        )


class SetAddressHandler(FranchiseEditHandler):

    def handle(self, franchise_id: str, new_address: str) -> Franchise | None:
        return self._apply(
            franchise_id,
            f"update address to {new_address!r}",
            lambda f: franchise_editor.set_address(f, new_address),
        )


class SetDescriptionHandler(FranchiseEditHandler):

    def handle(self, franchise_id: str, new_description: str) -> Franchise | None:
        return self._apply(
            franchise_id,
            "update description",
            lambda f: franchise_editor.set_description(f, new_description),
        )
