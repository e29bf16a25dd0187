"""Abstract repository for the Franchise aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory) live in
the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from franchises.domain.model.franchise import Franchise


class FranchiseRepository(ABC):

    @abstractmethod
    def get_by_id(self, franchise_id: str) -> Franchise | None:
        """Return a franchise by its ID, or None if not found.

        Only infrastructure failures raise (as ``StoreError``).
        """

    @abstractmethod
    def list_all(self) -> list[Franchise]:
        """Return every franchise in the store."""

    @abstractmethod
    def save(self, franchise: Franchise) -> Franchise:
        """Create or overwrite the whole franchise document.

        Assigns an ID when the franchise has none and returns the stored
        value.
        """

    @abstractmethod
    def delete_by_id(self, franchise_id: str) -> bool:
        """Remove a franchise. Returns False if there was nothing to remove."""
