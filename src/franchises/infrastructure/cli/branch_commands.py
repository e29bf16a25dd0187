"""CLI commands for branches of a franchise."""

from __future__ import annotations

import click

from franchises.application.add_branch import AddBranchHandler
from franchises.application.rename_branch import RenameBranchHandler
from franchises.domain.exceptions import DomainException
from franchises.domain.model.franchise import Branch
from franchises.infrastructure.bootstrap import franchise_repository
from franchises.infrastructure.cli.display import require_found


@click.command("add")
@click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
@click.option("--name", required=True, help="Branch name.")
def branch_add(franchise_id: str, name: str) -> None:
    """Add an empty branch to a franchise."""
    handler = AddBranchHandler(franchise_repo=franchise_repository())

    try:
        require_found(handler.handle(franchise_id, Branch(name=name)), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Branch '{name}' added to franchise {franchise_id}")


@click.command("rename")
@click.option("--franchise", "franchise_id", required=True, help="Franchise ID.")
@click.option("--name", "old_name", required=True, help="Current branch name.")
@click.option("--new-name", required=True, help="New branch name.")
def branch_rename(franchise_id: str, old_name: str, new_name: str) -> None:
    """Rename a branch (every branch with that name)."""
    handler = RenameBranchHandler(franchise_repo=franchise_repository())

    try:
        require_found(handler.handle(franchise_id, old_name, new_name), franchise_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Branch '{old_name}' renamed to '{new_name}'")
