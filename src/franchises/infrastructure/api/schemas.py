"""Request/response schemas for the HTTP API.

The same shapes are used in both directions.  Only type shape is
checked; names may be empty and stock or price may be negative.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from franchises.domain.model.franchise import Branch, Franchise, Product


class _Schema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ProductSchema(_Schema):
    name: str
    stock: int = 0
    price: Optional[float] = None

    def to_domain(self) -> Product:
        return Product(name=self.name, stock=self.stock, price=self.price)


class BranchSchema(_Schema):
    name: str
    products: list[ProductSchema] = Field(default_factory=list)

    def to_domain(self) -> Branch:
        return Branch(name=self.name, products=tuple(p.to_domain() for p in self.products))


class FranchiseSchema(_Schema):
    """A franchise document. ``id`` is assigned by the store when omitted."""

    id: Optional[str] = None
    name: str
    address: Optional[str] = None
    description: Optional[str] = None
    branches: list[BranchSchema] = Field(default_factory=list)

    def to_domain(self) -> Franchise:
        return Franchise(
            id=self.id,
            name=self.name,
            address=self.address,
            description=self.description,
            branches=tuple(b.to_domain() for b in self.branches),
        )

    @classmethod
    def from_domain(cls, franchise: Franchise) -> FranchiseSchema:
        return cls.model_validate(franchise)


class MessageResponse(BaseModel):
    message: str
