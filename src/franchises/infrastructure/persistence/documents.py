"""Mapping between the Franchise aggregate and its stored document.

A document is plain JSON-compatible data: the franchise fields plus a
nested list of branches, each with a nested list of products.
"""

from __future__ import annotations

from franchises.domain.model.franchise import Branch, Franchise, Product


def to_document(franchise: Franchise) -> dict:
    return {
        "id": franchise.id,
        "name": franchise.name,
        "address": franchise.address,
        "description": franchise.description,
        "branches": [
            {
                "name": branch.name,
                "products": [
                    {"name": p.name, "stock": p.stock, "price": p.price}
                    for p in branch.products
                ],
            }
            for branch in franchise.branches
        ],
    }


def from_document(raw: dict) -> Franchise:
    return Franchise(
        id=raw["id"],
        name=raw["name"],
        address=raw.get("address"),
        description=raw.get("description"),
        branches=tuple(
            Branch(
                name=b["name"],
                products=tuple(
                    Product(name=p["name"], stock=p.get("stock", 0), price=p.get("price"))
                    for p in b.get("products", [])
                ),
            )
            for b in raw.get("branches", [])
        ),
    )
