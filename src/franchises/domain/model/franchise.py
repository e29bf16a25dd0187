"""Franchise aggregate: the one document the store knows about.

A Franchise owns its branches, and each Branch owns its products.  The
whole tree is loaded and saved as a single unit.  All three types are
frozen: an edit builds a new value (see ``domain.service.franchise_editor``)
rather than mutating the one the store handed out.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A product stocked in a branch.

    Identified by ``name`` within its branch.  ``stock`` may be zero or
    negative; nothing here validates it.
    """

    name: str
    stock: int = 0
    price: float | None = None


@dataclass(frozen=True)
class Branch:
    """A branch of a franchise, identified by ``name`` within it."""

    name: str
    products: tuple[Product, ...] = ()


@dataclass(frozen=True)
class Franchise:
    """Aggregate root.

    ``id`` is None until the repository persists the franchise for the
    first time; after that it never changes.  Branch order is the listing
    order and is preserved by every edit.
    """

    name: str
    id: str | None = None
    address: str | None = None
    description: str | None = None
    branches: tuple[Branch, ...] = ()
