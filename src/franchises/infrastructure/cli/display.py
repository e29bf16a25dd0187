"""Shared output formatting and lookups for the CLI commands."""

from __future__ import annotations

import click

from franchises.domain.exceptions import EntityNotFoundError
from franchises.domain.model.franchise import Franchise


def require_found(franchise: Franchise | None, franchise_id: str) -> Franchise:
    if franchise is None:
        raise EntityNotFoundError(f"Franchise '{franchise_id}' not found")
    return franchise


def display_franchise(franchise: Franchise) -> None:
    click.echo(f"Franchise {franchise.id}  {franchise.name}")
    if franchise.address:
        click.echo(f"Address:     {franchise.address}")
    if franchise.description:
        click.echo(f"Description: {franchise.description}")
    click.echo()

    if not franchise.branches:
        click.echo("  No branches.")
        return

    for branch in franchise.branches:
        click.echo(f"  Branch: {branch.name}")
        if not branch.products:
            click.echo("    (no products)")
            continue
        click.echo(f"    {'Product':<20} {'Stock':>8} {'Price':>10}")
        click.echo(f"    {'-'*40}")
        for p in branch.products:
            price = "-" if p.price is None else f"{p.price:.2f}"
            click.echo(f"    {p.name:<20} {p.stock:>8} {price:>10}")
