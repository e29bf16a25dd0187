"""Franchise routes.

Every route builds the matching application handler around the injected
repository.  A handler returning None means the franchise ID did not
resolve, which becomes a 404.  Editing a branch or product that does not
exist still answers 200 with the unchanged franchise.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from franchises.application.add_branch import AddBranchHandler
from franchises.application.add_franchise import AddFranchiseHandler
from franchises.application.add_product import AddProductHandler
from franchises.application.delete_franchise import DeleteFranchiseHandler
from franchises.application.delete_product import DeleteProductHandler
from franchises.application.list_franchises import ListFranchisesHandler
from franchises.application.rename_branch import RenameBranchHandler
from franchises.application.set_product_stock import SetProductStockHandler
from franchises.application.show_franchise import ShowFranchiseHandler
from franchises.application.show_max_stock import ShowMaxStockHandler
from franchises.application.update_franchise import (
    RenameFranchiseHandler,
    SetAddressHandler,
    SetDescriptionHandler,
)
from franchises.application.update_product import (
    RenameProductHandler,
    SetProductPriceHandler,
)
from franchises.domain.model.franchise import Franchise
from franchises.domain.repository.franchise_repository import FranchiseRepository
from franchises.infrastructure.api.dependencies import get_franchise_repository
from franchises.infrastructure.api.schemas import (
    BranchSchema,
    FranchiseSchema,
    ProductSchema,
)

router = APIRouter(
    prefix="/franchises",
    tags=["Franchise Management"],
    responses={500: {"description": "Document store unavailable"}},
)

NOT_FOUND = {404: {"description": "Franchise not found"}}


def _found(franchise: Franchise | None) -> FranchiseSchema:
    if franchise is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Franchise not found")
    return FranchiseSchema.from_domain(franchise)


# --- Franchises ---------------------------------------------------------------




@router.post(
    "",
    response_model=FranchiseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new franchise",
)
def add_franchise(
    body: FranchiseSchema,
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    """Create a franchise, optionally with initial branches and products."""
    saved = AddFranchiseHandler(repo).handle(body.to_domain())
    return FranchiseSchema.from_domain(saved)


@router.get("", response_model=list[FranchiseSchema], summary="Get all franchises")
def list_franchises(repo: FranchiseRepository = Depends(get_franchise_repository)):
    """Every franchise in the store with its branches and products."""
    return [FranchiseSchema.from_domain(f) for f in ListFranchisesHandler(repo).handle()]


@router.get(
    "/{franchise_id}",
    response_model=FranchiseSchema,
    summary="Get franchise by ID",
    responses=NOT_FOUND,
)
def get_franchise(
    franchise_id: str,
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(ShowFranchiseHandler(repo).handle(franchise_id))


@router.delete(
    "/{franchise_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a franchise",
    responses=NOT_FOUND,
)
def delete_franchise(
    franchise_id: str,
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    """Remove the franchise document together with its branches and products."""
    if not DeleteFranchiseHandler(repo).handle(franchise_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Franchise not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{franchise_id}/name",
    response_model=FranchiseSchema,
    summary="Update franchise name",
    responses=NOT_FOUND,
)
def update_franchise_name(
    franchise_id: str,
    new_name: str = Query(..., alias="newName"),
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(RenameFranchiseHandler(repo).handle(franchise_id, new_name))


@router.put(
    "/{franchise_id}/address",
    response_model=FranchiseSchema,
    summary="Update franchise address",
    responses=NOT_FOUND,
)
def update_franchise_address(
    franchise_id: str,
    new_address: str = Query(..., alias="newAddress"),
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(SetAddressHandler(repo).handle(franchise_id, new_address))


@router.put(
    "/{franchise_id}/description",
    response_model=FranchiseSchema,
    summary="Update franchise description",
    responses=NOT_FOUND,
)
def update_franchise_description(
    franchise_id: str,
    new_description: str = Query(..., alias="newDescription"),
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(SetDescriptionHandler(repo).handle(franchise_id, new_description))


@router.get(
    "/{franchise_id}/products/most-stock-per-branch",
    response_model=list[dict[str, ProductSchema]],
    summary="Get product with most stock per branch",
    responses=NOT_FOUND,
)
def get_product_with_most_stock_per_branch(
    franchise_id: str,
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    """For each branch with products, the product holding the most stock.

    Ties go to the product listed first; branches without products are
    left out.
    """
    result = ShowMaxStockHandler(repo).handle(franchise_id)
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Franchise not found")
    return [
        {branch_name: ProductSchema.model_validate(product) for branch_name, product in entry.items()}
        for entry in result
    ]


# --- Branches -----------------------------------------------------------------


@router.post(
    "/{franchise_id}/branches",
    response_model=FranchiseSchema,
    summary="Add branch to franchise",
    responses=NOT_FOUND,
)
def add_branch_to_franchise(
    franchise_id: str,
    body: BranchSchema,
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    """Append a branch, optionally with initial products."""
    return _found(AddBranchHandler(repo).handle(franchise_id, body.to_domain()))


@router.put(
    "/{franchise_id}/branches/{old_branch_name}/name",
    response_model=FranchiseSchema,
    summary="Update branch name",
    responses=NOT_FOUND,
)
def update_branch_name(
    franchise_id: str,
    old_branch_name: str,
    new_branch_name: str = Query(..., alias="newBranchName"),
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(
        RenameBranchHandler(repo).handle(franchise_id, old_branch_name, new_branch_name)
    )


# --- Products -----------------------------------------------------------------


@router.post(
    "/{franchise_id}/branches/{branch_name}/products",
    response_model=FranchiseSchema,
    summary="Add product to branch",
    responses=NOT_FOUND,
)
def add_product_to_branch(
    franchise_id: str,
    branch_name: str,
    body: ProductSchema,
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(AddProductHandler(repo).handle(franchise_id, branch_name, body.to_domain()))


@router.delete(
    "/{franchise_id}/branches/{branch_name}/products/{product_name}",
    response_model=FranchiseSchema,
    summary="Delete product from branch",
    responses=NOT_FOUND,
)
def delete_product_from_branch(
    franchise_id: str,
    branch_name: str,
    product_name: str,
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    """Remove every product with this name from the branch."""
    return _found(DeleteProductHandler(repo).handle(franchise_id, branch_name, product_name))


@router.put(
    "/{franchise_id}/branches/{branch_name}/products/{product_name}/stock",
    response_model=FranchiseSchema,
    summary="Modify product stock",
    responses=NOT_FOUND,
)
def modify_product_stock(
    franchise_id: str,
    branch_name: str,
    product_name: str,
    new_stock: int = Query(..., alias="newStock"),
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(
        SetProductStockHandler(repo).handle(franchise_id, branch_name, product_name, new_stock)
    )


@router.put(
    "/{franchise_id}/branches/{branch_name}/products/{old_product_name}/name",
    response_model=FranchiseSchema,
    summary="Update product name",
    responses=NOT_FOUND,
)
def update_product_name(
    franchise_id: str,
    branch_name: str,
    old_product_name: str,
    new_product_name: str = Query(..., alias="newProductName"),
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(
        RenameProductHandler(repo).handle(
            franchise_id, branch_name, old_product_name, new_product_name
        )
    )


@router.put(
    "/{franchise_id}/branches/{branch_name}/products/{product_name}/price",
    response_model=FranchiseSchema,
    summary="Update product price",
    responses=NOT_FOUND,
)
def update_product_price(
    franchise_id: str,
    branch_name: str,
    product_name: str,
    new_price: float = Query(..., alias="newPrice"),
    repo: FranchiseRepository = Depends(get_franchise_repository),
):
    return _found(
        SetProductPriceHandler(repo).handle(franchise_id, branch_name, product_name, new_price)
    )
