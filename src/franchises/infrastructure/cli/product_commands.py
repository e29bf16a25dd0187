"""CLI commands for products inside a branch."""

from __future__ import annotations

import click

from franchises.application.add_product import AddProductHandler
from franchises.application.delete_product import DeleteProductHandler
from franchises.application.set_product_stock import SetProductStockHandler
from franchises.application.update_product import (
    RenameProductHandler,
    SetProductPriceHandler,
)
from franchises.domain.exceptions import DomainException
from franchises.domain.model.franchise import Product
from franchises.infrastructure.bootstrap import franchise_repository
from franchises.infrastructure.cli.display import require_found

franchise_option = click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
branch_option = click.option("--branch", "branch_name", required=True, help="Branch name.")


@click.command("add")
@franchise_option
@branch_option
@click.option("--name", required=True, help="Product name.")
@click.option("--stock", default=0, type=int, help="Units in stock.")
@click.option("--price", default=None, type=float, help="Unit price (e.g. 15.5).")
def product_add(
    franchise_id: str, branch_name: str, name: str, stock: int, price: float | None
) -> None:
    """Add a product to a branch."""
    handler = AddProductHandler(franchise_repo=franchise_repository())
    product = Product(name=name, stock=stock, price=price)

    try:
        require_found(handler.handle(franchise_id, branch_name, product), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{name}' added to branch '{branch_name}'")


@click.command("remove")
@franchise_option
@branch_option
@click.option("--name", required=True, help="Product name.")
def product_remove(franchise_id: str, branch_name: str, name: str) -> None:
    """Remove a product (every product with that name) from a branch."""
    handler = DeleteProductHandler(franchise_repo=franchise_repository())

    try:
        require_found(handler.handle(franchise_id, branch_name, name), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{name}' removed from branch '{branch_name}'")


@click.command("set-stock")
@franchise_option
@branch_option
@click.option("--name", required=True, help="Product name.")
@click.option("--stock", required=True, type=int, help="New stock value.")
def product_set_stock(franchise_id: str, branch_name: str, name: str, stock: int) -> None:
    """Overwrite a product's stock."""
    handler = SetProductStockHandler(franchise_repo=franchise_repository())

    try:
        require_found(handler.handle(franchise_id, branch_name, name, stock), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock of '{name}' in branch '{branch_name}' set to {stock}")


@click.command("rename")
@franchise_option
@branch_option
@click.option("--name", "old_name", required=True, help="Current product name.")
@click.option("--new-name", required=True, help="New product name.")
def product_rename(franchise_id: str, branch_name: str, old_name: str, new_name: str) -> None:
    """Rename a product."""
    handler = RenameProductHandler(franchise_repo=franchise_repository())

    try:
        require_found(
            handler.handle(franchise_id, branch_name, old_name, new_name), franchise_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{old_name}' renamed to '{new_name}'")


@click.command("set-price")
@franchise_option
@branch_option
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=float, help="New unit price.")
def product_set_price(franchise_id: str, branch_name: str, name: str, price: float) -> None:
    """Change a product's price."""
    handler = SetProductPriceHandler(franchise_repo=franchise_repository())

    try:
        require_found(handler.handle(franchise_id, branch_name, name, price), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price of '{name}' in branch '{branch_name}' set to {price:.2f}")
