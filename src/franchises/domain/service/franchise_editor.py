"""Domain service: copy-on-write edits of the Franchise aggregate.

Every function takes the current franchise plus edit parameters and
returns a NEW franchise.  Nothing here performs I/O or mutates its input.

Branches and products are looked up by exact name.  The lookup is a
map/filter over the whole sequence, so:

- a name that matches nothing leaves the sequence as it was (no error);
- a name that matches several elements edits every one of them.

Callers that rely on "first match only" must keep names unique.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

from franchises.domain.model.franchise import Branch, Franchise, Product

logger = logging.getLogger(__name__)


# --- Franchise fields ---------------------------------------------------------


def rename_franchise(franchise: Franchise, new_name: str) -> Franchise:
    logger.debug("Updating franchise name from %s to %s", franchise.name, new_name)
    return replace(franchise, name=new_name)


def set_address(franchise: Franchise, new_address: str) -> Franchise:
    logger.debug("Updating franchise address from %s to %s", franchise.address, new_address)
    return replace(franchise, address=new_address)


def set_description(franchise: Franchise, new_description: str) -> Franchise:
    logger.debug(
        "Updating franchise description from %s to %s",
        franchise.description,
        new_description,
    )
    return replace(franchise, description=new_description)


# --- Branches -----------------------------------------------------------------


def append_branch(franchise: Franchise, branch: Branch) -> Franchise:
    """Add ``branch`` at the end. Duplicate names are not checked."""
    logger.debug("Updating franchise %s with new branch %s", franchise.name, branch.name)
    return replace(franchise, branches=franchise.branches + (branch,))


def rename_branch(franchise: Franchise, old_name: str, new_name: str) -> Franchise:
    def edit(branch: Branch) -> Branch:
        logger.debug("Updating branch name from %s to %s", old_name, new_name)
        return replace(branch, name=new_name)

    return _map_branches(franchise, old_name, edit)


# --- Products -----------------------------------------------------------------


def append_product(franchise: Franchise, branch_name: str, product: Product) -> Franchise:
    """Add ``product`` at the end of the named branch's products."""

    def edit(branch: Branch) -> Branch:
        logger.debug("Updating branch %s with new product %s", branch_name, product.name)
        return replace(branch, products=branch.products + (product,))

    return _map_branches(franchise, branch_name, edit)


def remove_product(franchise: Franchise, branch_name: str, product_name: str) -> Franchise:
    """Drop EVERY product called ``product_name`` from the named branch."""

    def edit(branch: Branch) -> Branch:
        logger.debug("Deleting product %s from branch %s", product_name, branch_name)
        return replace(
            branch,
            products=tuple(p for p in branch.products if p.name != product_name),
        )

    return _map_branches(franchise, branch_name, edit)


def set_product_stock(
    franchise: Franchise, branch_name: str, product_name: str, new_stock: int
) -> Franchise:
    def edit(product: Product) -> Product:
        logger.debug(
            "Modifying stock of product %s from %s to %s",
            product_name,
            product.stock,
            new_stock,
        )
        return replace(product, stock=new_stock)

    return _map_products(franchise, branch_name, product_name, edit)


def rename_product(
    franchise: Franchise, branch_name: str, old_name: str, new_name: str
) -> Franchise:
    def edit(product: Product) -> Product:
        logger.debug("Updating product name from %s to %s", old_name, new_name)
        return replace(product, name=new_name)

    return _map_products(franchise, branch_name, old_name, edit)


def set_product_price(
    franchise: Franchise, branch_name: str, product_name: str, new_price: float
) -> Franchise:
    def edit(product: Product) -> Product:
        logger.debug("Updating product price from %s to %s", product.price, new_price)
        return replace(product, price=new_price)

    return _map_products(franchise, branch_name, product_name, edit)


# --- Internal helpers ---------------------------------------------------------


def _map_branches(
    franchise: Franchise,
    branch_name: str,
    edit: Callable[[Branch], Branch],
) -> Franchise:
    """Apply ``edit`` to every branch named ``branch_name``."""
    branches = tuple(
        edit(branch) if branch.name == branch_name else branch
        for branch in franchise.branches
    )
    return replace(franchise, branches=branches)


def _map_products(
    franchise: Franchise,
    branch_name: str,
    product_name: str,
    edit: Callable[[Product], Product],
) -> Franchise:
    """Apply ``edit`` to every matching product of every matching branch."""

    def edit_branch(branch: Branch) -> Branch:
        products = tuple(
            edit(product) if product.name == product_name else product
            for product in branch.products
        )
        return replace(branch, products=products)

    return _map_branches(franchise, branch_name, edit_branch)
