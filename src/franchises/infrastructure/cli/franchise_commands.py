"""CLI commands for the Franchise aggregate."""

from __future__ import annotations

import click

from franchises.application.add_franchise import AddFranchiseHandler
from franchises.application.delete_franchise import DeleteFranchiseHandler
from franchises.application.list_franchises import ListFranchisesHandler
from franchises.application.show_franchise import ShowFranchiseHandler
from franchises.application.show_max_stock import ShowMaxStockHandler
from franchises.application.update_franchise import (
    RenameFranchiseHandler,
    SetAddressHandler,
    SetDescriptionHandler,
)
from franchises.domain.exceptions import DomainException
from franchises.domain.model.franchise import Franchise
from franchises.infrastructure.bootstrap import franchise_repository
from franchises.infrastructure.cli.display import display_franchise, require_found


@click.command("add")
@click.option("--name", required=True, help="Franchise name.")
@click.option("--address", default=None, help="Postal address.")
@click.option("--description", default=None, help="Free-text description.")
@click.option("--id", "franchise_id", default=None, help="Explicit ID (generated if omitted).")
def franchise_add(
    name: str, address: str | None, description: str | None, franchise_id: str | None
) -> None:
    """Create a new franchise."""
    handler = AddFranchiseHandler(franchise_repo=franchise_repository())

    try:
        franchise = handler.handle(
            Franchise(id=franchise_id, name=name, address=address, description=description)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Franchise {franchise.id} '{franchise.name}' created")


@click.command("list")
def franchise_list() -> None:
    """List all franchises."""
    handler = ListFranchisesHandler(franchise_repo=franchise_repository())

    try:
        franchises = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not franchises:
        click.echo("No franchises found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Branches':>8}")
    click.echo("-" * 68)
    for f in franchises:
        click.echo(f"{f.id:<34} {f.name:<24} {len(f.branches):>8}")


@click.command("show")
@click.option("--id", "franchise_id", required=True, help="Franchise ID to display.")
def franchise_show(franchise_id: str) -> None:
    """Show a franchise with its branches and products."""
    handler = ShowFranchiseHandler(franchise_repo=franchise_repository())

    try:
        franchise = require_found(handler.handle(franchise_id), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_franchise(franchise)


@click.command("delete")
@click.option("--id", "franchise_id", required=True, help="Franchise ID to delete.")
def franchise_delete(franchise_id: str) -> None:
    """Delete a franchise and everything in it."""
    handler = DeleteFranchiseHandler(franchise_repo=franchise_repository())

    try:
        deleted = handler.handle(franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not deleted:
        raise click.ClickException(f"Franchise '{franchise_id}' not found")
    click.echo(f"Franchise {franchise_id} deleted.")


@click.command("rename")
@click.option("--id", "franchise_id", required=True, help="Franchise ID.")
@click.option("--name", required=True, help="New name.")
def franchise_rename(franchise_id: str, name: str) -> None:
    """Rename a franchise."""
    handler = RenameFranchiseHandler(franchise_repo=franchise_repository())

    try:
        require_found(handler.handle(franchise_id, name), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Franchise {franchise_id} renamed to '{name}'")


@click.command("set-address")
@click.option("--id", "franchise_id", required=True, help="Franchise ID.")
@click.option("--address", required=True, help="New address.")
def franchise_set_address(franchise_id: str, address: str) -> None:
    """Change a franchise's address."""
    handler = SetAddressHandler(franchise_repo=franchise_repository())

    try:
        require_found(handler.handle(franchise_id, address), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Franchise {franchise_id} address updated")


@click.command("set-description")
@click.option("--id", "franchise_id", required=True, help="Franchise ID.")
@click.option("--description", required=True, help="New description.")
def franchise_set_description(franchise_id: str, description: str) -> None:
    """Change a franchise's description."""
    handler = SetDescriptionHandler(franchise_repo=franchise_repository())

    try:
        require_found(handler.handle(franchise_id, description), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Franchise {franchise_id} description updated")


@click.command("top-stock")
@click.option("--id", "franchise_id", required=True, help="Franchise ID.")
def franchise_top_stock(franchise_id: str) -> None:
    """Show the product with the most stock in each branch."""
    handler = ShowMaxStockHandler(franchise_repo=franchise_repository())

    try:
        result = handler.handle(franchise_id)
        if result is None:
            require_found(None, franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result:
        click.echo("No branches with products.")
        return

    click.echo(f"{'Branch':<20} {'Product':<20} {'Stock':>8}")
    click.echo("-" * 50)
    for entry in result:
        for branch_name, product in entry.items():
            click.echo(f"{branch_name:<20} {product.name:<20} {product.stock:>8}")
